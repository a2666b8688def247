"""
This module aims to express an interface agreement
between the evaluator and the various kinds of run-time data.
"""

from abc import ABC
from typing import Sequence, Union


class _Undefined:
	""" The distinguished no-value. There is only ever the one. """
	_instance = None
	def __new__(cls):
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance
	def __repr__(self): return "undefined"
	def __bool__(self): return False
	def __reduce__(self): return (_Undefined, ())

UNDEFINED = _Undefined()


class SmallJSValue(ABC):
	""" Root for classes that implement specialized run-time data structures """
	pass

VALUE = Union[int, str, _Undefined, SmallJSValue]
ARGS = Sequence[VALUE]
