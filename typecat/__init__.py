"""
A tiny kit of functional building-blocks: identity, composition, and memoization.
"""
from .combinators import identity, compose, FnA, FnB, FnC
from .memo import Memoize, Lookup, Status
from .caching import Cache, UnboundedCache, LRUCache
from .concurrency import Synchronized

__version__ = '0.1.0'
