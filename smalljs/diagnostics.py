"""
Everything about telling people that something went wrong.

There is exactly one kind of user-facing trouble, the Failure.
It knows its line (once somebody stamps one on it) and says so in its message.
The Report collects failures and, on request, complains to the console.
"""
import sys, random
from pathlib import Path
from typing import Any, Optional, Sequence
from boozetools.support.failureprone import SourceText, illustration

from .syntax import Script

class Failure(Exception):
	""" The one user-facing error kind. Not locally recoverable; aborts the script. """
	def __init__(self, message:str, line_number:Optional[int]=None):
		super().__init__(message, line_number)
		self.message = message
		self.line_number = line_number
	
	def at(self, line_number:int) -> "Failure":
		"""
		Natives know nothing of lines. The call-site
		stamps one on the way out, but only if it's missing.
		"""
		if self.line_number is None:
			self.line_number = line_number
		return self
	
	def __str__(self):
		if self.line_number is None: return self.message
		return "at line %d, %s" % (self.line_number, self.message)

def type_error(value:Any, expected:str, line_number:Optional[int]=None) -> Failure:
	return Failure("type error %s is not %s" % (describe(value), expected), line_number)

def arity_error(need:int, got:int, line_number:Optional[int]=None) -> Failure:
	plural = '' if need == 1 else 's'
	return Failure("arity error, expected %d argument%s but got %d" % (need, plural, got), line_number)

def already_declared(name:str, line_number:int) -> Failure:
	return Failure("variable %s already declared" % name, line_number)

def not_declared(name:str, line_number:int) -> Failure:
	return Failure("variable %s is not declared" % name, line_number)

def arithmetic_error(what:str) -> Failure:
	return Failure("arithmetic error, " + what)

def render(value) -> str:
	""" What `print` shows. Strings play themselves. """
	return str(value)

def describe(value) -> str:
	""" How a value looks in a message, where a bare string would be confusing. """
	return repr(value) if isinstance(value, str) else str(value)


def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm. ", "", ""]
	grumbles = ['Drat', 'Oops', 'Rats', 'Nuts', 'Bother', 'Fiddlesticks', 'Good Grief']
	resignations = [
		'That script cannot continue.',
		'Something has gone sideways.',
		'Here is what I know.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, grumbles, resignations)))

class Report:
	""" Accumulates failures and optionally chatters about the run while it goes. """
	_issues : list["Pic"]
	
	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self) -> Sequence["Pic"]: return tuple(self._issues)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def trace_call(self, name:str, args:Sequence):
		if self._verbose > 1:
			self.info("%s called with [%s]" % (name, ", ".join(map(render, args))))
	
	def failure(self, failure:Failure, script:Optional[Script]=None):
		""" Actually make an entry of an issue """
		problem = []
		if script is not None and script.text is not None and failure.line_number is not None:
			problem.append(Annotation(script, failure.line_number))
		self._issues.append(Pic(str(failure), problem))
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)


class Annotation:
	path: Optional[Path]
	line_number: int
	caption: str
	def __init__(self, script:Script, line_number:int, caption:str=""):
		self.path = script.path
		self.text = script.text
		self.line_number = line_number
		self.caption = caption
	
	def illustrate(self):
		source = SourceText(self.text, filename=str(self.path))
		lines = self.text.splitlines(keepends=True)
		if not 1 <= self.line_number <= len(lines):
			return "line %d (not in the source text)" % self.line_number
		offset = sum(map(len, lines[:self.line_number-1]))
		row, col = source.find_row_col(offset)
		single_line = source.line_of_text(row)
		width = max(1, len(single_line.strip()))
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	
	@property
	def intro(self): return self._intro
	
	def as_text(self):
		lines = [self._intro, ""]
		path = None
		for ann in self._anns:
			if ann.path != path:
				path = ann.path
				lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return "\n".join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
