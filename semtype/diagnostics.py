"""
Collecting and explaining problems.

The core operations never print anything. Whatever drives them
(the command line, or some larger tool) keeps a Report, feeds it
the issues it runs into, and decides when to complain.
"""
import sys, random
from boozetools.support.failureprone import illustration

from .notation import NotationError

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm. ", "", ""]

	exclamations = [
		'Ack', 'Blast', 'Bother', 'Confound it', 'Crumbs', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Jeepers',
		'Mercy', 'Nuts', 'Rats', 'Botheration',
	]

	resignations = [
		'That is not a type I can read.',
		'The brackets have defeated me.',
		'I cannot make sense of this.',
		'Something is amiss.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, exclamations, resignations)))

class Report:
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def sick(self): return bool(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	# Methods the notation reader's callers are likely to use:
	def bad_notation(self, ex:NotationError, where:str=""):
		intro = "Could not read a type%s." % ((" from "+where) if where else "")
		self.issue(Pic(intro, ex.text, ex.offset, ex.hint))

class Pic:
	""" One issue: an introduction, then the offending line with a caret under the trouble spot. """
	def __init__(self, intro:str, line:str, column:int, caption:str):
		self._intro, self._line, self._column, self._caption = intro, line, column, caption

	def as_text(self):
		lines = [self._intro, ""]
		lines.append(illustration(self._line, self._column, 1, prefix="    |", caption=self._caption))
		return '\n'.join(lines)

def _bemoan(issues):
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
