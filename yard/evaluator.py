"""
Postfix evaluation with a stack of integers.
"""
from typing import Iterable
from boozetools.support.foundation import Visitor
from .lexicon import classify, Kind, Integer, Operator
from .primitive import OPS
from .failure import (
	ParseError, InsufficientOperands, DivisionByZero, InvalidToken, MalformedExpression,
)
from .options import Options, DEFAULT

STOP = object()

class Evaluator(Visitor):
	"""
	One quirk deserves mention: if an operator arrives when exactly one value
	sits on the stack, that value is taken as the answer on the spot, and the
	rest of the input goes unread. Well-formed postfix never gets into that
	state, so this mostly papers over malformed input such as "+ 7".
	Options.strict_operands turns it into a proper InsufficientOperands.
	"""
	_values: list[int]
	
	def __init__(self, options:Options=DEFAULT):
		self._options = options
		self._values = []
	
	def evaluate(self, postfix:Iterable) -> int:
		self._values = values = []
		for token in postfix:
			if self.visit(classify(token)) is STOP:
				return values.pop()
		if len(values) != 1:
			raise MalformedExpression(None)
		return values[0]
	
	def visit_Integer(self, kind:Integer):
		try: value = int(kind.token)
		except ValueError: raise ParseError(kind.token) from None  # Beyond int()'s digit limit.
		if value > self._options.largest_literal():
			raise ParseError(kind.token)
		self._values.append(value)
	
	def visit_Operator(self, kind:Operator):
		values = self._values
		if len(values) == 1 and not self._options.strict_operands:
			return STOP
		if len(values) < 2:
			raise InsufficientOperands(kind.token)
		arg1 = values.pop()
		arg2 = values.pop()
		try: values.append(OPS[kind.symbol].fn(arg2, arg1))
		except ZeroDivisionError: raise DivisionByZero(kind.token) from None
	
	def _not_postfix(self, kind:Kind):
		raise InvalidToken(kind.token)
	
	visit_LeftParen = visit_RightParen = visit_Blank = visit_Invalid = _not_postfix
