"""
The set of expression nodes the interpreter knows how to run.
Some external parser builds these bottom-up; nothing here ever changes them afterward.
Every node remembers the line it came from, so that failures can say where they happened.
"""
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence


class Expr:
	""" Root of the closed family of expression nodes """
	__slots__ = ("line_number",)
	line_number: int
	
	def __init__(self, line_number:int):
		assert isinstance(line_number, int), type(line_number)
		object.__setattr__(self, "line_number", line_number)
	
	def __setattr__(self, key, value):
		raise AttributeError("%s is immutable" % type(self).__name__)
	
	def __repr__(self):
		return "<%s@%d>" % (type(self).__name__, self.line_number)

def _init(node:Expr, **fields):
	for k, v in fields.items(): object.__setattr__(node, k, v)


class Block(Expr):
	__slots__ = ("instrs",)
	instrs: tuple[Expr, ...]
	def __init__(self, instrs:Sequence[Expr], line_number:int):
		super().__init__(line_number)
		assert all(isinstance(i, Expr) for i in instrs), instrs
		_init(self, instrs=tuple(instrs))

class Literal(Expr):
	__slots__ = ("value",)
	value: Any
	def __init__(self, value, line_number:int):
		super().__init__(line_number)
		_init(self, value=value)
	def __repr__(self): return "<Literal %r>" % (self.value,)

class FunCall(Expr):
	__slots__ = ("qualifier", "args")
	qualifier: Expr
	args: tuple[Expr, ...]
	def __init__(self, qualifier:Expr, args:Sequence[Expr], line_number:int):
		super().__init__(line_number)
		_init(self, qualifier=qualifier, args=tuple(args))

class LocalVarAccess(Expr):
	__slots__ = ("name",)
	name: str
	def __init__(self, name:str, line_number:int):
		super().__init__(line_number)
		_init(self, name=name)
	def __repr__(self): return "<ref:%s>" % self.name

class LocalVarAssignment(Expr):
	__slots__ = ("name", "expr", "declaration")
	name: str
	expr: Expr
	declaration: bool
	def __init__(self, name:str, expr:Expr, declaration:bool, line_number:int):
		super().__init__(line_number)
		_init(self, name=name, expr=expr, declaration=bool(declaration))

class Fun(Expr):
	"""
	A function literal. The body is shared by every closure made from it.
	The parser spells an anonymous function either as no name at all or as the placeholder.
	"""
	__slots__ = ("name", "parameters", "body")
	name: Optional[str]
	parameters: tuple[str, ...]
	body: Block
	def __init__(self, name:Optional[str], parameters:Sequence[str], body:Block, line_number:int):
		super().__init__(line_number)
		assert isinstance(body, Block), type(body)
		_init(self, name=name, parameters=tuple(parameters), body=body)
	
	def display_name(self) -> str:
		return self.name or ANONYMOUS
	
	def is_named(self) -> bool:
		return self.display_name() != ANONYMOUS
	
	def __repr__(self): return "<Fun %s/%d>" % (self.display_name(), len(self.parameters))

ANONYMOUS = "lambda"

class Return(Expr):
	__slots__ = ("expr",)
	expr: Expr
	def __init__(self, expr:Expr, line_number:int):
		super().__init__(line_number)
		_init(self, expr=expr)

class If(Expr):
	__slots__ = ("condition", "true_block", "false_block")
	condition: Expr
	true_block: Block
	false_block: Block
	def __init__(self, condition:Expr, true_block:Block, false_block:Block, line_number:int):
		super().__init__(line_number)
		_init(self, condition=condition, true_block=true_block, false_block=false_block)

class New(Expr):
	__slots__ = ("init_map",)
	init_map: tuple[tuple[str, Expr], ...]
	def __init__(self, init_map:Mapping[str, Expr], line_number:int):
		super().__init__(line_number)
		# Declared order matters: field values get evaluated in it.
		_init(self, init_map=tuple(init_map.items()))

class FieldAccess(Expr):
	__slots__ = ("receiver", "name")
	receiver: Expr
	name: str
	def __init__(self, receiver:Expr, name:str, line_number:int):
		super().__init__(line_number)
		_init(self, receiver=receiver, name=name)

class FieldAssignment(Expr):
	__slots__ = ("receiver", "name", "expr")
	receiver: Expr
	name: str
	expr: Expr
	def __init__(self, receiver:Expr, name:str, expr:Expr, line_number:int):
		super().__init__(line_number)
		_init(self, receiver=receiver, name=name, expr=expr)

class MethodCall(Expr):
	__slots__ = ("receiver", "name", "args")
	receiver: Expr
	name: str
	args: tuple[Expr, ...]
	def __init__(self, receiver:Expr, name:str, args:Sequence[Expr], line_number:int):
		super().__init__(line_number)
		_init(self, receiver=receiver, name=name, args=tuple(args))


VARIANTS = (
	Block, Literal, FunCall, LocalVarAccess, LocalVarAssignment, Fun,
	Return, If, New, FieldAccess, FieldAssignment, MethodCall,
)


class Script:
	"""
	What the parser hands over: the top-level block, plus (optionally)
	where it came from and the text itself, which diagnostics use to draw pictures.
	"""
	def __init__(self, body:Block, path:Optional[Path]=None, text:Optional[str]=None):
		assert isinstance(body, Block), type(body)
		self.body = body
		self.path = path
		self.text = text
