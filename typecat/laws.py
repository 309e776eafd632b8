"""
The properties every piece of this package must satisfy, written as plain
functions that raise AssertionError when a property fails to hold.

The command line runs these as a self-check. The unit tests cover the same
ground and more, so nothing here is load-bearing for correctness. It's just
nice to be able to ask an installed copy whether it still behaves.
"""
from time import perf_counter
from typing import Callable
from .combinators import identity, compose
from .memo import Memoize, Status
from .diagnostics import Report

SAMPLES = [0, 1, -7, 3.5, "", "typecat", None, (1, 2), frozenset({3})]

class Counter:
	""" Wraps a function and counts how often anyone actually calls it. """
	def __init__(self, fn:Callable):
		self.fn = fn
		self.calls = 0
	def __call__(self, x):
		self.calls += 1
		return self.fn(x)

def identity_law():
	for x in SAMPLES + [[], {}, object()]:
		assert identity(x) is x, x

def composition_law():
	f, g = (lambda a: a * 3), str
	for x in [0, 1, 2, -5, 7.25]:
		assert compose(f, g)(x) == g(f(x)), x

def composition_with_identity_law():
	f, g = (lambda a: a + 1), (lambda b: -b)
	for x in range(-3, 4):
		assert compose(identity, g)(x) == g(x), x
		assert compose(f, identity)(x) == f(x), x

def memoization_correctness_law():
	for x in SAMPLES:
		assert Memoize(repr).apply(x) == repr(x), x

def memoization_caching_law():
	f = Counter(lambda n: str(n))
	memo = Memoize(f)
	results = [memo.apply(3) for _ in range(3)]
	assert f.calls == 1, f.calls
	assert results == ["3", "3", "3"], results

def memoization_distinguishes_inputs_law():
	f = Counter(lambda n: n * 10)
	memo = Memoize(f)
	first, second, third = memo.apply(1), memo.apply(2), memo.apply(1)
	assert f.calls == 2, f.calls
	assert (first, second, third) == (10, 20, 10)

def failure_not_cached_law():
	f = Counter(lambda n: 1 / n)
	memo = Memoize(f)
	for _ in range(2):
		try: memo.apply(0)
		except ZeroDivisionError: pass
		else: raise AssertionError("Failure did not propagate")
	assert f.calls == 2, f.calls
	assert memo.lookup(0).status is Status.MISS

def end_to_end_law():
	h = compose(int, lambda b: b * 2)
	assert h("42") == 84
	assert identity(h("42")) == 84

LAWS = {
	"respects identity": identity_law,
	"composes": composition_law,
	"composes with identity": composition_with_identity_law,
	"memoizes correctly": memoization_correctness_law,
	"memoizes": memoization_caching_law,
	"distinguishes inputs": memoization_distinguishes_inputs_law,
	"does not cache failure": failure_not_cached_law,
	"end to end": end_to_end_law,
}

def check_all(report:Report):
	""" Run every law, filing an issue in the report for each one that fails. """
	complain = report.on_error("checking laws")
	for name, law in LAWS.items():
		try: law()
		except AssertionError as ex:
			complain("%s: %s" % (name, ex.args[0] if ex.args else "assertion failed"))
		else:
			report.info("OK:", name)

def time_memoization(rounds:int) -> tuple[float, float]:
	"""
	Time the first (un-memoized) pass over ``range(rounds)`` against
	a second pass that should come entirely out of the cache.
	Returns the two durations in seconds.
	"""
	memo = Memoize(str)
	start = perf_counter()
	for i in range(rounds): memo.apply(i)
	cold = perf_counter() - start
	start = perf_counter()
	for i in range(rounds): memo.apply(i)
	warm = perf_counter() - start
	return cold, warm
