"""
Memoization: remember what a unary function said about each input it has seen,
and say it again instead of asking twice.

The guarantees are few but firm:

* ``f`` runs at most once per distinct input over the life of a Memoize.
* A hit never mutates anything.
* If ``f`` raises, the exception goes straight to the caller and nothing is
  written down, so the next attempt with that input really does call ``f``.
* ``None`` is a perfectly good answer and gets remembered like any other.
  Use ``lookup`` to tell "remembered None" apart from "never asked".

Nothing in here takes a lock. See ``typecat.concurrency`` for that.
"""
from enum import Enum
from typing import Callable, NamedTuple, Any, Optional
from .caching import Cache, UnboundedCache

class Status(Enum):
	MISS = "miss"
	HIT = "hit"
	ABSENT = "hit with absent value"

class Lookup(NamedTuple):
	""" Result of probing the cache without evaluating anything. """
	status: Status
	value: Any = None
	
	def __bool__(self): return self.status is not Status.MISS

MISSED = Lookup(Status.MISS)

class Memoize:
	""" Wrap a unary function so that each distinct input is evaluated at most once. """
	
	def __init__(self, f:Callable, cache:Optional[Cache]=None):
		if not callable(f):
			raise TypeError("Memoize needs a callable, not %r" % (f,))
		self._f = f
		self._cache = UnboundedCache() if cache is None else cache
	
	@property
	def f(self): return self._f
	
	@property
	def cache(self) -> Cache: return self._cache
	
	def apply(self, x):
		cache = self._cache
		if cache.contains(x):
			return cache.get(x)
		# If this raises, nothing gets stored.
		value = self._f(x)
		cache.set(x, value)
		return value
	
	__call__ = apply
	
	def lookup(self, x) -> Lookup:
		if not self._cache.contains(x):
			return MISSED
		value = self._cache.peek(x)
		if value is None:
			return Lookup(Status.ABSENT)
		return Lookup(Status.HIT, value)
	
	def __contains__(self, x): return self._cache.contains(x)
	def __len__(self): return len(self._cache)
	
	def __repr__(self):
		return "<Memoize %s with %r>" % (getattr(self._f, '__name__', self._f), self._cache)
