"""
The overall control: text in, integer out.
Each call builds its own shunter and evaluator, so calls never interfere.
"""
from typing import Iterable, Iterator, Optional
from .lexicon import Token
from .front_end import tokenize
from .shunter import Shunter
from .evaluator import Evaluator
from .failure import Failure
from .options import Options, DEFAULT

SHUNT = "shunt"
EVALUATE = "evaluate"

class Yuck(Exception):
	"""
	The first argument will be the name of the stage fraught with error.
	The second is the Failure that stage raised.
	"""
	def __init__(self, stage:str, failure:Failure):
		super().__init__(stage, failure)
	
	@property
	def stage(self) -> str: return self.args[0]
	
	@property
	def failure(self) -> Failure: return self.args[1]
	
	@property
	def kind(self) -> str: return self.failure.kind()
	
	def __str__(self): return "%s stage: %s" % (self.stage, self.failure)

def shunt_expression(expression:str, options:Options=DEFAULT) -> list[Token]:
	tokens = tokenize(expression)
	try: return Shunter(options).convert(tokens)
	except Failure as ex: raise Yuck(SHUNT, ex) from ex

def evaluate_postfix(postfix:Iterable, options:Options=DEFAULT) -> int:
	try: return Evaluator(options).evaluate(postfix)
	except Failure as ex: raise Yuck(EVALUATE, ex) from ex

def evaluate_expression(expression:str, options:Options=DEFAULT) -> int:
	return evaluate_postfix(shunt_expression(expression, options), options)

def each_result(expressions:Iterable[str], report, options:Options=DEFAULT) -> Iterator[tuple[str, Optional[int]]]:
	"""
	Evaluate each expression on its own merits, yielding it with its result
	as soon as that is known. Failures go to the report, and the result is None.
	The report may raise TooManyIssues, which ends the iteration.
	"""
	for expression in expressions:
		report.info("Evaluating:", expression)
		try:
			postfix = shunt_expression(expression, options)
			report.info("Expression successfully shunted:", " ".join(postfix))
			result = evaluate_postfix(postfix, options)
		except Yuck as ex:
			report.failed(expression, ex)
			result = None
		yield expression, result

def evaluate_all(expressions:Iterable[str], report, options:Options=DEFAULT) -> list[Optional[int]]:
	""" Like each_result, but all at once. Nothing comes back if TooManyIssues interrupts. """
	return [result for _, result in each_result(expressions, report, options)]
