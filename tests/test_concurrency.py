import unittest
from threading import Thread, Event

from typecat import Memoize, Synchronized, Status
from typecat.laws import Counter

class SynchronizedTests(unittest.TestCase):
	
	def test_concurrent_misses_evaluate_once(self):
		started = Event()
		release = Event()
		def slow(x):
			started.set()
			release.wait(5)
			return x * 2
		f = Counter(slow)
		shared = Synchronized(Memoize(f))
		results = []
		threads = [Thread(target=lambda: results.append(shared.apply(21))) for _ in range(4)]
		for t in threads: t.start()
		started.wait(5)
		release.set()
		for t in threads: t.join(5)
		self.assertEqual([42] * 4, results)
		self.assertEqual(1, f.calls)
		self.assertEqual(1, len(shared))
	
	def test_failure_still_not_cached(self):
		f = Counter(lambda n: 1 / n)
		shared = Synchronized(Memoize(f))
		for _ in range(2):
			with self.assertRaises(ZeroDivisionError):
				shared(0)
		self.assertEqual(2, f.calls)
		self.assertIs(Status.MISS, shared.lookup(0).status)
	
	def test_lock_is_released_after_failure(self):
		shared = Synchronized(Memoize(lambda n: 1 / n))
		with self.assertRaises(ZeroDivisionError):
			shared.apply(0)
		self.assertEqual(0.5, shared.apply(2))
	
	def test_membership_and_f_match_memoize(self):
		shared = Synchronized(Memoize(str))
		self.assertNotIn(7, shared)
		shared.apply(7)
		self.assertIn(7, shared)
		self.assertIs(str, shared.f)
	
	def test_wraps_only_a_memoize(self):
		with self.assertRaises(TypeError):
			Synchronized(str)

if __name__ == '__main__':
	unittest.main()
