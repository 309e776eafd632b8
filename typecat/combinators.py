"""
The two smallest combinators worth having.

``compose(f, g)`` reads as "g after f": the result feeds its argument to ``f``
first and hands whatever comes out over to ``g``. Nothing here catches anything.
If ``f`` or ``g`` raises, the caller of the composed function sees it as-is.
"""
from typing import Callable, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
T = TypeVar("T")

FnA = Callable[[A], B]
FnB = Callable[[B], C]
FnC = Callable[[A], C]

def identity(x:T) -> T:
	""" Returns the same object it was given. """
	return x

def compose(f:FnA, g:FnB) -> FnC:
	""" Build a fresh unary function equivalent to ``g(f(x))``. """
	return Composed(f, g)

class Composed:
	""" The run-time manifestation of "g after f". Holds nothing but the two parts. """
	__slots__ = ('_f', '_g')
	
	def __init__(self, f:FnA, g:FnB):
		self._f, self._g = f, g
	
	def __call__(self, x):
		return self._g(self._f(x))
	
	def __repr__(self):
		return "<composed %s after %s>" % (_name(self._g), _name(self._f))

def _name(fn) -> str:
	return getattr(fn, '__name__', None) or repr(fn)
