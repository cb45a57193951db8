"""
Words of an arithmetic expression, and what sort of word each one is.

A token is just a string, but it remembers where in the line it came from
so that complaints can point at it. Its category is never stored:
``classify`` works it out from the text every time someone asks.
"""
from typing import Optional
from .primitive import OPS

DIGITS = frozenset("0123456789")
OPERATORS = frozenset(OPS)

class Token(str):
	""" A word of the expression. Compares equal to the plain string. """
	where: Optional[slice]
	def __new__(cls, text:str, where:Optional[slice]=None):
		it = super().__new__(cls, text)
		it.where = where
		return it

class Kind:
	""" Base of the tagged variant that ``classify`` returns. """
	def __init__(self, token:Token):
		self.token = token
	def __repr__(self): return "<%s %r>" % (type(self).__name__, str(self.token))

class Integer(Kind): pass

class Operator(Kind):
	@property
	def symbol(self) -> str: return str(self.token)

class LeftParen(Kind): pass
class RightParen(Kind): pass

class Blank(Kind):
	""" The empty word a sloppy tokenizer leaves behind at end-of-line. """

class Invalid(Kind): pass

def is_integer(text:str) -> bool:
	return bool(text) and all(c in DIGITS for c in text)

def classify(token) -> Kind:
	if not isinstance(token, Token): token = Token(token)
	if is_integer(token): return Integer(token)
	if token in OPERATORS: return Operator(token)
	if token == "(": return LeftParen(token)
	if token == ")": return RightParen(token)
	if token == "": return Blank(token)
	return Invalid(token)
