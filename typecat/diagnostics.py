"""
Reporting, in roughly the manner of a compiler that has found something to complain about.

Informational chatter goes to stderr, and only when asked for.
Issues accumulate quietly until someone calls ``complain_to_console``.
"""
import sys
from typing import Callable
from boozetools.support.failureprone import Issue, Severity, SourceText

class TooManyIssues(Exception):
	pass

def _fetch(key) -> SourceText:
	# There are no source files behind these issues, so there is never any evidence to excerpt.
	return SourceText("", filename=None)

class Report:
	_issues : list[Issue]
	
	def __init__(self, *, verbose:int=0, max_issues=20):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self) -> list[Issue]: return list(self._issues)
	
	def issue(self, it:Issue):
		assert isinstance(it, Issue), it
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)
	
	def reset(self):
		self._issues.clear()
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def error(self, phase:str, msg:str):
		self.issue(Issue(phase, Severity.ERROR, msg, {}))
	
	def warning(self, phase:str, msg:str):
		self.issue(Issue(phase, Severity.WARNING, msg, {}))
	
	def on_error(self, phase:str) -> Callable[[str], None]:
		""" Return a callback that files errors under the given phase. """
		def err(msg): self.error(phase, msg)
		return err
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(_fetch), file=sys.stderr)
		sys.stderr.flush()
	
	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)
