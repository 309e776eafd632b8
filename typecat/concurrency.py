"""
A Memoize on its own assumes one thread at a time.
If you must share one across threads, wrap it here.

The lock is held across the whole miss path, so two threads asking about the
same new input cannot both get past the cache and call ``f`` twice. The price
is that misses on *different* inputs also wait their turn. Failures still
leave the cache untouched.
"""
from threading import Lock
from .memo import Memoize, Lookup

class Synchronized:
	def __init__(self, memo:Memoize):
		if not isinstance(memo, Memoize):
			raise TypeError("Synchronized wraps a Memoize, not %r" % (memo,))
		self.memo = memo
		self._mutex = Lock()
	
	def apply(self, x):
		with self._mutex:
			return self.memo.apply(x)
	
	__call__ = apply
	
	@property
	def f(self): return self.memo.f
	
	def lookup(self, x) -> Lookup:
		with self._mutex:
			return self.memo.lookup(x)
	
	def __contains__(self, x):
		with self._mutex:
			return x in self.memo
	
	def __len__(self):
		with self._mutex:
			return len(self.memo)
