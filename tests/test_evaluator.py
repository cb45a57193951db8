import unittest

from yard.evaluator import Evaluator
from yard.options import Options
from yard.primitive import truncating_division
from yard.failure import (
	ParseError, InsufficientOperands, DivisionByZero, InvalidToken, MalformedExpression,
)

def calc(postfix, **kwargs):
	return Evaluator(Options(**kwargs)).evaluate(postfix.split())

class EvaluationTests(unittest.TestCase):
	
	def test_samples(self):
		for postfix, value in [
			("1 3 +", 4),
			("1 3 + 2 *", 8),
			("4 2 / 6 +", 8),
			("4 12 1 2 * / +", 10),
			("10 3 /", 3),
			("0", 0),
			("2147483647", 2147483647),
		]:
			with self.subTest(postfix=postfix):
				self.assertEqual(value, calc(postfix))
	
	def test_left_operand_was_pushed_first(self):
		self.assertEqual(6, calc("10 4 -"))
		self.assertEqual(-6, calc("4 10 -"))
		self.assertEqual(3, calc("7 2 /"))
		self.assertEqual(0, calc("2 7 /"))
	
	def test_division_truncates_toward_zero(self):
		self.assertEqual(-1, calc("1 4 - 2 /"))
		for dividend, divisor, quotient in [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (0, 5, 0)]:
			with self.subTest(dividend=dividend, divisor=divisor):
				self.assertEqual(quotient, truncating_division(dividend, divisor))
	
	def test_lone_operand_is_taken_as_the_answer(self):
		# This is arguably a bug, kept because it is long-standing behavior.
		# An operator that finds one value ends evaluation without reading further.
		self.assertEqual(7, calc("7 +"))
		self.assertEqual(3, calc("1 2 + +"))
		self.assertEqual(7, calc("7 + nonsense"))
		self.assertEqual(0, calc("0 *"))
	
	def test_strict_operands_reject_the_lone_operand(self):
		with self.assertRaises(InsufficientOperands) as cm:
			calc("7 +", strict_operands=True)
		self.assertEqual("+", cm.exception.token)
		self.assertEqual(8, calc("1 3 + 2 *", strict_operands=True))
	
	def test_fresh_storage_each_time(self):
		sut = Evaluator()
		self.assertEqual(3, sut.evaluate(["1", "2", "+"]))
		self.assertEqual(5, sut.evaluate(["5"]))

class EvaluationFailureTests(unittest.TestCase):
	
	def test_empty_stack_operator(self):
		with self.assertRaises(InsufficientOperands):
			calc("+")
	
	def test_division_by_zero(self):
		with self.assertRaises(DivisionByZero) as cm:
			calc("5 0 /")
		self.assertEqual("/", cm.exception.token)
		with self.assertRaises(DivisionByZero):
			calc("5 3 3 - /")
	
	def test_malformed(self):
		for postfix in ["", "1 2", "1 2 3 +"]:
			with self.subTest(postfix=postfix):
				with self.assertRaises(MalformedExpression) as cm:
					calc(postfix)
				self.assertIsNone(cm.exception.token)
	
	def test_not_postfix_tokens(self):
		for token in ["(", ")", "", "x"]:
			with self.subTest(token=token):
				with self.assertRaises(InvalidToken) as cm:
					Evaluator().evaluate(["1", token])
				self.assertEqual(token, cm.exception.token)
	
	def test_literal_too_big(self):
		with self.assertRaises(ParseError) as cm:
			calc("2147483648")
		self.assertEqual("2147483648", cm.exception.token)
		self.assertEqual(2147483648, calc("2147483648", word_size=64))
		with self.assertRaises(ParseError):
			calc("128", word_size=8)
		with self.assertRaises(ParseError):
			calc("9" * 10000, word_size=64)
	
	def test_failure_text(self):
		with self.assertRaises(DivisionByZero) as cm:
			calc("5 0 /")
		self.assertEqual("DivisionByZero", cm.exception.kind())
		self.assertIn("division by zero", str(cm.exception))

if __name__ == '__main__':
	unittest.main()
