"""
Infix to postfix, after Dijkstra's railway-yard picture.

Numbers go straight to the output. Operators and left-parentheses wait
on a siding (the operator stack) until a right-parenthesis or the end
of input sends them along.

Unless asked otherwise, an incoming operator never evicts anything from
the siding. That means there is no notion of precedence: "2 * 3 + 4"
comes out as "2 3 4 + *". This is the behavior people have come to rely
on, so it stays the default. See Options.precedence_aware.
"""
from collections import deque
from typing import Iterable
from boozetools.support.foundation import Visitor
from .lexicon import Token, classify, Integer, Operator, LeftParen, RightParen, Blank, Invalid
from .primitive import OPS
from .failure import MismatchedParenthesis, InvalidToken
from .options import Options, DEFAULT

class Shunter(Visitor):
	_operators: list[Token]
	_output: deque[Token]
	
	def __init__(self, options:Options=DEFAULT):
		self._options = options
		self._operators = []
		self._output = deque()
	
	def convert(self, tokens:Iterable) -> list[Token]:
		""" Return the postfix sequence, or raise some Failure. """
		self._operators, self._output = [], deque()
		for token in tokens:
			self.visit(classify(token))
		self._drain()
		return list(self._output)
	
	def visit_Integer(self, kind:Integer):
		self._output.append(kind.token)
	
	def visit_Operator(self, kind:Operator):
		if self._options.precedence_aware:
			self._yield_to(OPS[kind.symbol].precedence)
		self._operators.append(kind.token)
	
	def visit_LeftParen(self, kind:LeftParen):
		self._operators.append(kind.token)
	
	def visit_RightParen(self, kind:RightParen):
		while self._operators:
			top = self._operators.pop()
			if top == "(": return
			self._output.append(top)
		raise MismatchedParenthesis(kind.token)
	
	def visit_Blank(self, kind:Blank):
		pass
	
	def visit_Invalid(self, kind:Invalid):
		raise InvalidToken(kind.token)
	
	def _yield_to(self, precedence:int):
		# Everything is left-associative, hence >= rather than >.
		stack = self._operators
		while stack and stack[-1] in OPS and OPS[stack[-1]].precedence >= precedence:
			self._output.append(stack.pop())
	
	def _drain(self):
		while self._operators:
			top = self._operators.pop()
			if isinstance(classify(top), (LeftParen, RightParen)):
				raise MismatchedParenthesis(top)
			self._output.append(top)
