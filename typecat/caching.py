"""
This module expresses an interface agreement between the memoizer and
whatever actually remembers things on its behalf.

The memoizer only ever asks three questions: "Have you got this key?",
"What did you store under it?", and "Please store this." Anything that can
answer those may stand in, so a bounded cache slots in without the memoizer
changing its algorithm one bit.
"""
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Hashable, Any

class Cache(ABC):
	""" Root for classes that remember results on behalf of a Memoize. """
	
	@abstractmethod
	def contains(self, key:Hashable) -> bool: pass
	
	@abstractmethod
	def get(self, key:Hashable) -> Any:
		""" Raises KeyError if the key was never stored (or has been evicted). """
	
	@abstractmethod
	def peek(self, key:Hashable) -> Any:
		""" Like get, but leaves any bookkeeping (such as recency) exactly as it was. """

	@abstractmethod
	def set(self, key:Hashable, value:Any): pass
	
	@abstractmethod
	def __len__(self) -> int: pass

class UnboundedCache(Cache):
	"""
	Grows by one entry per distinct key, forever.
	Nothing is ever evicted or overwritten by the memoizer.
	"""
	def __init__(self):
		self._table = {}
	def contains(self, key): return key in self._table
	def get(self, key): return self._table[key]
	peek = get
	def set(self, key, value): self._table[key] = value
	def __len__(self): return len(self._table)
	def __repr__(self): return "<UnboundedCache of %d>" % len(self._table)

class LRUCache(Cache):
	""" Keeps at most ``capacity`` entries, dropping whichever was used least recently. """
	def __init__(self, capacity:int):
		if capacity < 1:
			raise ValueError("An LRUCache needs room for at least one entry, not %r" % capacity)
		self.capacity = capacity
		self._table = OrderedDict()
	
	def contains(self, key): return key in self._table
	
	def get(self, key):
		value = self._table[key]
		self._table.move_to_end(key)
		return value

	def peek(self, key): return self._table[key]

	def set(self, key, value):
		self._table[key] = value
		self._table.move_to_end(key)
		while len(self._table) > self.capacity:
			self._table.popitem(last=False)
	
	def __len__(self): return len(self._table)
	def __repr__(self): return "<LRUCache %d/%d>" % (len(self._table), self.capacity)
