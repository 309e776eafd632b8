import unittest

from typecat import identity, compose

class Boom(Exception):
	pass

def explode(x):
	raise Boom(x)

class IdentityTests(unittest.TestCase):
	def test_returns_the_same_instance(self):
		for x in [0, "abc", None, [1, 2], {"a": 1}, object()]:
			with self.subTest(x=x):
				self.assertIs(x, identity(x))

class ComposeTests(unittest.TestCase):
	def test_g_after_f(self):
		f = lambda a: a + 1
		g = lambda b: b * 10
		h = compose(f, g)
		for x in range(-3, 4):
			self.assertEqual(g(f(x)), h(x))
		self.assertEqual(20, h(1))
	
	def test_parse_then_double(self):
		h = compose(int, lambda b: b * 2)
		self.assertEqual(84, h("42"))
		self.assertEqual(84, identity(h("42")))
	
	def test_identity_on_either_side(self):
		f, g = str, len
		for x in ["", "ab", "abcd"]:
			self.assertEqual(g(x), compose(identity, g)(x))
			self.assertEqual(f(x), compose(f, identity)(x))
	
	def test_errors_from_f_propagate_and_g_is_skipped(self):
		seen = []
		h = compose(explode, seen.append)
		with self.assertRaises(Boom) as cm:
			h(5)
		self.assertEqual((5,), cm.exception.args)
		self.assertEqual([], seen)
	
	def test_errors_from_g_propagate(self):
		h = compose(identity, explode)
		with self.assertRaises(Boom):
			h("x")
	
	def test_each_call_makes_a_fresh_function(self):
		self.assertIsNot(compose(str, len), compose(str, len))
	
	def test_repr_names_both_parts(self):
		self.assertEqual("<composed len after str>", repr(compose(str, len)))

if __name__ == '__main__':
	unittest.main()
