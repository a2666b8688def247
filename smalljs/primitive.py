"""
Build the root environment: the handful of natives every script can see.
There is no operator syntax at this level; `+` and friends are ordinary bindings
which scripts call like any other function.
"""
import operator
from typing import Callable, TextIO
from .diagnostics import Report, type_error, arithmetic_error, render, describe
from .tree_walker.types import UNDEFINED
from .tree_walker.values import Environment, Primitive, JSObject


def _int_operand(x):
	# bool is an int in Python, but not in this language.
	if type(x) is not int: raise type_error(x, "an integer")
	return x

def _arithmetic(op:Callable) -> Callable:
	return lambda a, b: op(_int_operand(a), _int_operand(b))

def _divide(a, b):
	a, b = _int_operand(a), _int_operand(b)
	if b == 0: raise arithmetic_error("division by zero")
	# Truncate toward zero.
	q = abs(a) // abs(b)
	return q if (a < 0) == (b < 0) else -q

def _remainder(a, b):
	a, b = _int_operand(a), _int_operand(b)
	if b == 0: raise arithmetic_error("modulo by zero")
	# The remainder takes the sign of the dividend.
	return a - b * _divide(a, b)

def same_value(a, b) -> bool:
	""" Primitives compare by value, objects by identity. """
	if isinstance(a, JSObject) or isinstance(b, JSObject): return a is b
	return type(a) is type(b) and a == b

def _relation(op:Callable) -> Callable:
	def compare(a, b):
		if type(a) is int and type(b) is int or type(a) is str and type(b) is str:
			return int(op(a, b))
		if type(a) in (int, str): raise type_error(b, "comparable with " + describe(a))
		raise type_error(a, "comparable")
	return compare

BINARY = {
	"+" : _arithmetic(operator.add),
	"-" : _arithmetic(operator.sub),
	"*" : _arithmetic(operator.mul),
	"/" : _divide,
	"%" : _remainder,
	"==" : lambda a, b: int(same_value(a, b)),
	"!=" : lambda a, b: int(not same_value(a, b)),
	"<" : _relation(operator.lt),
	"<=" : _relation(operator.le),
	">" : _relation(operator.gt),
	">=" : _relation(operator.ge),
}

def root_environment(out:TextIO, report:Report) -> Environment:
	env = Environment.root()
	env.register("global", env)
	
	def sj_print(*args):
		report.trace_call("print", args)
		print(" ".join(map(render, args)), file=out)
		return UNDEFINED
	
	env.register("print", Primitive("print", sj_print))
	for glyph, fn in BINARY.items():
		env.register(glyph, Primitive(glyph, fn, 2))
	return env
