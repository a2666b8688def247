"""
The generic machinery that everything needs,
without the specific methods corresponding to particular syntax.
"""

from .. import syntax
from .types import VALUE


class ReturnSignal(BaseException):
	"""
	Carries a `return` value up to the invocation that owns it.
	This is control flow, not trouble; so it must never look like a Failure.
	"""
	def __init__(self, value:VALUE, line_number:int):
		super().__init__(value, line_number)
		self.value = value
		self.line_number = line_number


def evaluate(expr:syntax.Expr, env) -> VALUE:
	try: fn = EVALUATE[type(expr)]
	except KeyError: raise NotImplementedError(type(expr), expr)
	return fn(expr, env)

EVALUATE = {}

def attach_evaluation_methods(python_scope):
	for _k, _v in list(python_scope.items()):
		if _k.startswith("_eval_"):
			_t = _v.__annotations__["expr"]
			assert isinstance(_t, type), (_k, _t)
			EVALUATE[_t] = _v
	missing = [t.__name__ for t in syntax.VARIANTS if t not in EVALUATE]
	assert not missing, "No evaluation method for: " + ", ".join(missing)
