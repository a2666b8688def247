"""
This is the overall control for the run-time:
prepare a root environment, then walk the script's top-level block.
"""
import sys
from typing import Optional, TextIO
from .. import syntax
from ..diagnostics import Failure, Report
from ..primitive import root_environment
from .evaluator import evaluate, ReturnSignal
from . import runtime  # NOQA: installs the evaluation methods

def interpret(script:syntax.Script, out:TextIO=None, report:Optional[Report]=None):
	"""
	Run the script for its effects. The result of the top-level block goes nowhere.
	A Failure propagates to the caller; so does running out of Python stack.
	"""
	out = sys.stdout if out is None else out
	report = Report(verbose=0) if report is None else report
	env = root_environment(out, report)
	report.info("Running", script.path or "<script>")
	try:
		evaluate(script.body, env)
	except ReturnSignal as rs:
		raise Failure("return outside of a function", rs.line_number) from None

def run(script:syntax.Script, out:TextIO=None, report:Optional[Report]=None) -> int:
	""" Like interpret, but complains to the console instead of raising. Returns an exit status. """
	report = Report(verbose=0) if report is None else report
	try:
		interpret(script, out, report)
	except Failure as f:
		report.failure(f, script)
		report.complain_to_console()
		return 1
	return 0
