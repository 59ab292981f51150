import unittest

from boozetools.parsing.interface import ParseError
from semtype.ontology import ExponentVariable
from semtype.algebra import Atomic, Functional, Alternation, leaves
from semtype.construction import construct
from semtype.compatibility import compatible
from semtype.notation import to_string, from_string, NotationError

A, B, C = Atomic("A"), Atomic("B"), Atomic("C")

class Writing(unittest.TestCase):

	def test_atomic_decorations_in_order(self):
		self.assertEqual("E", to_string(Atomic("E")))
		self.assertEqual("E_N", to_string(Atomic("E", subscript="N")))
		self.assertEqual("E_T", to_string(Atomic("E", tense="T")))
		self.assertEqual("E_A_U^2", to_string(Atomic("E", 2, "A", "U")))

	def test_functional(self):
		self.assertEqual("(A=>B)", to_string(Functional(A, B)))
		self.assertEqual("((A=>B)=>C)_V_T^3", to_string(Functional(Functional(A, B), C, 3, "V", "T")))

	def test_alternation_shows_only_exponent(self):
		self.assertEqual("{A|B}", to_string(Alternation(A, B, 1, "N", "T")))
		self.assertEqual("{A|(B=>C)}^2", to_string(Alternation(A, Functional(B, C), 2)))

	def test_empty(self):
		self.assertEqual("", to_string(None))
		self.assertEqual("{|A^2}", to_string(Alternation(None, Atomic("A", 2))))

	def test_big_exponent(self):
		self.assertEqual("A^12", to_string(Atomic("A", 12)))

	def test_repr_uses_notation(self):
		self.assertEqual("<Functional (A=>B)>", repr(Functional(A, B)))


class Reading(unittest.TestCase):

	def test_functional(self):
		it = from_string("(A=>B)")
		self.assertEqual(Functional(A, B), it)
		self.assertEqual(1, it.exponent)
		self.assertEqual("(A=>B)", to_string(it))

	def test_alternation(self):
		self.assertEqual(Alternation(A, B, 2), from_string("{A|B}^2"))

	def test_case_insensitive(self):
		self.assertEqual(Functional(Atomic("E"), Atomic("T"), 1, "V"), from_string("(e=>t)_v"))

	def test_atomic_decorations(self):
		self.assertEqual(Atomic("A", subscript="N"), from_string("A_N"))
		self.assertEqual(Atomic("A", tense="U"), from_string("A_U"))
		self.assertEqual(Atomic("A", 3, "P", "T"), from_string("A_P_T^3"))
		self.assertEqual(Atomic("NP2"), from_string("np2"))

	def test_nesting(self):
		text = "{(A=>{B|C})|((A=>B)=>(C=>A)_N)}^2"
		self.assertEqual(text, to_string(from_string(text)))
		it = from_string(text)
		self.assertEqual(Functional(A, Alternation(B, C)), it.left)

	def test_alternate_domain_gets_range_pushed_through(self):
		it = from_string("({A|B}=>C)")
		self.assertEqual(Alternation(Functional(A, C), Functional(B, C)), it)
		self.assertEqual("{(A=>C)|(B=>C)}", to_string(it))

	def test_zero_exponent_reads_as_nothing(self):
		self.assertIsNone(from_string("A^0"))
		self.assertIsNone(from_string("{A|B}^0"))

	def test_variable_exponent(self):
		it = from_string("A^x")
		self.assertEqual(construct("A", None, ExponentVariable("X")), it)
		self.assertEqual(6, len(list(leaves(it))))
		self.assertEqual("{|{A|{A^2|{A^3|{A^4|A^5}}}}}", to_string(it))

	def test_empty_alternatives_read_back(self):
		it = from_string("A^X")
		self.assertEqual(it, from_string(to_string(it)))
		self.assertEqual(Alternation(A, None), from_string("{A|}"))

	def test_compatible_with_subscript_absent(self):
		self.assertTrue(compatible(from_string("A_N"), from_string("A"), None))


class RoundTrip(unittest.TestCase):

	def test_constructed_types_survive(self):
		for t in [
			construct("E", None, 1),
			construct("E", None, 4, "N", "U"),
			construct(A, B, 2, "V"),
			construct(construct(A, B, 1), construct(B, C, 3, tense="T"), 1, "P"),
			construct(None, None, 1, options=[A, Functional(B, C)]),
			construct(None, None, 5, options=[Alternation(A, B), C]),
			construct(Alternation(A, B), C, 1),
			construct(Alternation(A, B, 2), C, 1),
			construct(None, Functional(A, B), 3, "N"),
			construct("A", None, [1, 2, 3]),
		]:
			with self.subTest(t):
				again = from_string(to_string(t))
				self.assertTrue(compatible(again, t))
				self.assertEqual(to_string(t), to_string(again))


class Rejection(unittest.TestCase):

	def test_bogons(self):
		for bogon in [
			"", "#", "A)", "(A=>B", "(A B)", "(A=>B))", "(=>B)", "{A|B", "{A B}", "{A|B|C}", "{|}",
			"A_X", "A_", "A_T_N", "A_N_N", "A_T_T", "{A|B}_N", "A^", "A^XY", "A^-1", "A^^2",
			"(A^0=>B)", "(A=>B^0)", "A B",
		]:
			with self.subTest(bogon):
				with self.assertRaises(NotationError):
					from_string(bogon)

	def test_error_says_where(self):
		with self.assertRaises(NotationError) as cm:
			from_string("(a=>b")
		ex = cm.exception
		self.assertEqual("(A=>B", ex.text)
		self.assertEqual(5, ex.offset)
		self.assertIn("')'", ex.hint)
		self.assertIsInstance(ex, ParseError)

	def test_error_at_bad_decoration(self):
		with self.assertRaises(NotationError) as cm:
			from_string("E_Q")
		self.assertEqual(1, cm.exception.offset)

	def test_hint_lists_what_would_fit(self):
		with self.assertRaises(NotationError) as cm:
			from_string("{|}")
		self.assertEqual(2, cm.exception.offset)
		self.assertIn("a symbol", cm.exception.hint)
		self.assertIn("'{'", cm.exception.hint)
		with self.assertRaises(NotationError) as cm:
			from_string("a_t_n")
		self.assertEqual(3, cm.exception.offset)
		self.assertIn("an exponent", cm.exception.hint)

	def test_zero_exponent_inside_function_type(self):
		with self.assertRaises(NotationError) as cm:
			from_string("(A^0=>B)")
		self.assertIn("non-empty domain and range", cm.exception.hint)

	def test_only_ascii(self):
		# Upper-casing would turn this into "SS", an innocent-looking symbol.
		for text, offset in [("\u00df", 0), ("A\u00df", 1), ("(A=>\u0131)", 4), ("A^\u00b2", 2)]:
			with self.subTest(text):
				with self.assertRaises(NotationError) as cm:
					from_string(text)
				self.assertEqual(offset, cm.exception.offset)
				self.assertEqual(text, cm.exception.text)


class Depth(unittest.TestCase):
	""" Nesting far deeper than the interpreter's recursion limit. """

	def test_deep_function_type_reads_and_writes(self):
		text = "(A=>"*1200 + "A" + ")"*1200
		it = from_string(text)
		self.assertEqual(text, to_string(it))
		self.assertTrue(compatible(it, it))

	def test_deep_alternation_reads_and_writes(self):
		text = "{A|"*1200 + "B" + "}"*1200
		it = from_string(text)
		self.assertEqual(text, to_string(it))
		self.assertEqual(1201, len(list(leaves(it))))

	def test_deep_left_nesting(self):
		text = "("*1200 + "A" + "=>A)"*1200
		self.assertEqual(text, to_string(from_string(text)))


if __name__ == '__main__':
	unittest.main()
