"""
One evaluation method per kind of expression.
Each takes the node and the environment active where it appears.
"""
from .. import syntax
from ..diagnostics import Failure, type_error, already_declared, not_declared
from .types import VALUE, UNDEFINED
from .evaluator import evaluate, ReturnSignal, attach_evaluation_methods
from .values import JSObject, PlainObject, Environment, Function, Closure


def as_object(value:VALUE, line_number:int) -> JSObject:
	if not isinstance(value, JSObject):
		raise type_error(value, "an object", line_number)
	return value

def as_function(value:VALUE, line_number:int) -> Function:
	if not isinstance(value, Function):
		raise type_error(value, "a function", line_number)
	return value

def is_truthy(value:VALUE) -> bool:
	""" Only undefined and the integer zero are false. Empty strings are true. """
	if value is UNDEFINED: return False
	if type(value) is int and value == 0: return False
	return True

def _invoke(function:Function, receiver:VALUE, args, line_number:int) -> VALUE:
	try: return function.invoke(receiver, args)
	except Failure as f: raise f.at(line_number)

###############################################################################

def _eval_block(expr:syntax.Block, env:Environment):
	for instr in expr.instrs:
		evaluate(instr, env)
	return UNDEFINED

def _eval_literal(expr:syntax.Literal, env:Environment):
	return expr.value

def _eval_fun_call(expr:syntax.FunCall, env:Environment):
	function = as_function(evaluate(expr.qualifier, env), expr.line_number)
	args = [evaluate(a, env) for a in expr.args]
	return _invoke(function, UNDEFINED, args, expr.line_number)

def _eval_local_var_access(expr:syntax.LocalVarAccess, env:Environment):
	return env.lookup(expr.name)

def _eval_local_var_assignment(expr:syntax.LocalVarAssignment, env:Environment):
	value = evaluate(expr.expr, env)
	if expr.declaration:
		# This also refuses to shadow a name from any enclosing scope.
		if env.owner(expr.name) is not None:
			raise already_declared(expr.name, expr.line_number)
		env.register(expr.name, value)
	else:
		owner = env.owner(expr.name)
		if owner is None:
			raise not_declared(expr.name, expr.line_number)
		owner.register(expr.name, value)
	return value

def _eval_fun(expr:syntax.Fun, env:Environment):
	closure = Closure(expr, env)
	if expr.is_named():
		env.register(expr.name, closure)
	return closure

def _eval_return(expr:syntax.Return, env:Environment):
	raise ReturnSignal(evaluate(expr.expr, env), expr.line_number)

def _eval_if(expr:syntax.If, env:Environment):
	condition = evaluate(expr.condition, env)
	sequel = expr.true_block if is_truthy(condition) else expr.false_block
	return evaluate(sequel, env)

def _eval_new(expr:syntax.New, env:Environment):
	return PlainObject([(name, evaluate(x, env)) for name, x in expr.init_map])

def _eval_field_access(expr:syntax.FieldAccess, env:Environment):
	receiver = as_object(evaluate(expr.receiver, env), expr.line_number)
	return receiver.get(expr.name)

def _eval_field_assignment(expr:syntax.FieldAssignment, env:Environment):
	receiver = as_object(evaluate(expr.receiver, env), expr.line_number)
	return receiver.set(expr.name, evaluate(expr.expr, env))

def _eval_method_call(expr:syntax.MethodCall, env:Environment):
	receiver = as_object(evaluate(expr.receiver, env), expr.line_number)
	method = as_function(receiver.get(expr.name), expr.line_number)
	args = [evaluate(a, env) for a in expr.args]
	return _invoke(method, receiver, args, expr.line_number)

attach_evaluation_methods(globals())
