"""
This module defines the object family the tree-walker operates in terms of.
Integers and strings play themselves; scopes, objects, and functions need more help.

One reference type (JSObject) stands for all three roles:
	* an Environment resolves names, walking outward along its parent links;
	* a PlainObject just has fields;
	* a Function has fields and can also be invoked.
Callers pick behavior by which of these they hold.
"""
from abc import abstractmethod
from reprlib import recursive_repr
from typing import Callable, Iterable, Optional
from .. import syntax
from ..diagnostics import arity_error, describe
from .types import SmallJSValue, UNDEFINED, VALUE, ARGS
from .evaluator import evaluate, ReturnSignal


class JSObject(SmallJSValue):
	""" Anything with fields. Field access never looks past the object itself. """
	def __init__(self):
		self._fields: dict[str, VALUE] = {}
	
	def get(self, name:str) -> VALUE:
		return self._fields.get(name, UNDEFINED)
	
	def set(self, name:str, value:VALUE) -> VALUE:
		self._fields[name] = value
		return value
	
	def has(self, name:str) -> bool:
		return name in self._fields

class PlainObject(JSObject):
	""" What `new` makes. No parent, no behavior. """
	def __init__(self, fields:Iterable[tuple[str, VALUE]]=()):
		super().__init__()
		self._fields.update(fields)
	
	@recursive_repr("{...}")
	def __str__(self):
		return "{%s}" % ", ".join("%s: %s" % (k, describe(v)) for k, v in self._fields.items())

class Environment(JSObject):
	"""
	A scope. Parent links are plain references, so a frame stays alive
	exactly as long as some call or closure can still reach it.
	"""
	def __init__(self, parent:Optional["Environment"]):
		super().__init__()
		assert parent is None or isinstance(parent, Environment), type(parent)
		self.parent = parent
	
	@classmethod
	def root(cls) -> "Environment":
		return cls(None)
	
	def register(self, name:str, value:VALUE):
		""" Bind in this very frame. Whether that's allowed is the caller's business. """
		self._fields[name] = value
	
	def owner(self, name:str) -> Optional["Environment"]:
		""" The nearest frame along the chain which binds the name, if any. """
		env = self
		while env is not None:
			if name in env._fields: return env
			env = env.parent
		return None
	
	def lookup(self, name:str) -> VALUE:
		env = self.owner(name)
		return UNDEFINED if env is None else env._fields[name]
	
	def __str__(self): return "<environment>"

###############################################################################

class Function(JSObject):
	""" A run-time object that can be applied with arguments. """
	def __init__(self, name:str):
		super().__init__()
		self.name = name
	
	@abstractmethod
	def invoke(self, receiver:VALUE, args:ARGS) -> VALUE: pass
	
	def __str__(self): return "function " + self.name

class Primitive(Function):
	""" A native: a Python callable that gets the bare argument values. """
	def __init__(self, name:str, fn:Callable, arity:Optional[int]=None):
		super().__init__(name)
		self._fn = fn
		self._arity = arity
	
	def invoke(self, receiver:VALUE, args:ARGS) -> VALUE:
		if self._arity is not None and len(args) != self._arity:
			raise arity_error(self._arity, len(args))
		return self._fn(*args)

class Closure(Function):
	""" The run-time manifestation of a function literal: a callable value tied to its natal environment. """
	def __init__(self, fun:syntax.Fun, captured:Environment):
		super().__init__(fun.display_name())
		self._fun = fun
		self._captured = captured
	
	def invoke(self, receiver:VALUE, args:ARGS) -> VALUE:
		fun = self._fun
		if len(args) != len(fun.parameters):
			raise arity_error(len(fun.parameters), len(args), fun.line_number)
		inner = Environment(self._captured)
		inner.register("this", receiver)
		for name, arg in zip(fun.parameters, args):
			inner.register(name, arg)
		try:
			evaluate(fun.body, inner)
		except ReturnSignal as rs:
			return rs.value
		return UNDEFINED
