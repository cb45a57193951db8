"""
The ways an expression can fail to produce a value.

Each failure carries the guilty token, or None if no single token is to blame.
Nothing here recovers from anything: the first failure ends the attempt.
"""

class Failure(Exception):
	description = "a problem"
	hint = ""
	
	def __init__(self, token=None):
		super().__init__(token)
	
	@property
	def token(self): return self.args[0]
	
	def kind(self) -> str: return type(self).__name__
	
	def __str__(self):
		if self.token is None: return self.description
		return "%s: %r" % (self.description, str(self.token))

class MismatchedParenthesis(Failure):
	description = "mismatched parentheses"
	hint = "Every '(' needs a ')' to its right, and vice versa."

class InvalidToken(Failure):
	description = "a word that is neither number, operator, nor parenthesis"
	hint = "Put spaces between everything: '( 1 + 2 )' rather than '(1+2)'."

class ParseError(Failure):
	description = "a number too big to represent"

class InsufficientOperands(Failure):
	description = "an operator without two operands"

class DivisionByZero(Failure):
	description = "division by zero"

class MalformedExpression(Failure):
	description = "an expression that does not come to exactly one value"
