import sys, random
from typing import Sequence
from boozetools.support.failureprone import SourceText, illustration

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	
	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Heavens', 'Jeepers', 'Nuts', 'Rats', 'Snap',
	]
	
	resignations = [
		'That does not add up.',
		'I cannot make this come out to a number.',
		'Arithmetic has failed me.',
		'Something here does not compute.',
	]
	
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects complaints about expressions until someone wants to hear them. """
	_issues : list["Pic"]
	
	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self) -> Sequence["Pic"]: return tuple(self._issues)
	
	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) >= self._max_issues:
			raise TooManyIssues(self)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)
	
	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
	
	def failed(self, expression:str, yuck):
		""" File the exception the executive raised for this expression. """
		failure = yuck.failure
		intro = "The %s stage found %s in: %s" % (yuck.stage, failure.description, expression)
		where = getattr(failure.token, "where", None)
		if where is None: problem = []
		else: problem = [Annotation(expression, where, failure.kind())]
		footer = [failure.hint] if failure.hint else []
		self.issue(Pic(intro, problem, footer, kind=failure.kind()))

class Annotation:
	text: str
	slice: slice
	caption: str
	def __init__(self, text:str, where:slice, caption:str=""):
		self.text = text
		self.slice = where
		self.caption = caption
	def illustrate(self):
		source = SourceText(self.text)
		row, col = source.find_row_col(self.slice.start)
		single_line = source.line_of_text(row)
		width = self.slice.stop - self.slice.start
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=(), kind:str=""):
		self._intro, self._anns, self._footer = intro, anns, footer
		self.kind = kind
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
