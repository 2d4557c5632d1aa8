"""
The least a driver needs: run a program, show the answer, and
let the report know when the answer turns out to be an error.
Deciding what to do after an error is the caller's business.
"""
import sys
from typing import Iterable
from . import syntax
from .objects import Object, is_error
from .evaluator import Evaluator
from .diagnostics import Report

def run_program(program:syntax.Program, report:Report, *, stream=None) -> Object:
	assert isinstance(program, syntax.Program), program
	if stream is None: stream = sys.stdout
	result = Evaluator(report).evaluate(program)
	if is_error(result):
		report.runtime_error(program, result)
	else:
		print(result.inspect(), file=stream)
	return result

def run_programs(programs:Iterable[syntax.Program], report:Report, *, stream=None) -> list[Object]:
	"""
	Keep going past errors; the report gives up for us
	(by raising TooManyIssues) once it has heard enough.
	"""
	return [run_program(p, report, stream=stream) for p in programs]
