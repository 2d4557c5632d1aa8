"""
The set of parse-nodes the evaluator consumes.
Some external parser builds these bottom-up; nothing in here ever changes a node after construction.
Each node renders itself back into something resembling source text, which is handy for tracing.
"""
from typing import Optional, Sequence
from .objects import INT64_MIN, INT64_MAX

class Node:
	def __str__(self): raise NotImplementedError(type(self))

class Statement(Node): pass

class Expression(Node): pass

def _statements(statements) -> tuple[Statement, ...]:
	statements = tuple(statements or ())
	for s in statements: assert isinstance(s, Statement), s
	return statements

class Program(Node):
	statements: tuple[Statement, ...]
	def __init__(self, statements: Sequence[Statement]):
		self.statements = _statements(statements)
	def __str__(self): return "".join(map(str, self.statements))

class BlockStatement(Statement):
	statements: tuple[Statement, ...]
	def __init__(self, statements: Sequence[Statement]):
		self.statements = _statements(statements)
	def __str__(self): return "{ %s }"%"".join(map(str, self.statements))

class ReturnStatement(Statement):
	def __init__(self, return_value: Expression):
		assert isinstance(return_value, Expression), return_value
		self.return_value = return_value
	def __str__(self): return "return %s;"%self.return_value

class ExpressionStatement(Statement):
	def __init__(self, expression: Expression):
		assert isinstance(expression, Expression), expression
		self.expression = expression
	def __str__(self): return str(self.expression)

class PrefixExpression(Expression):
	def __init__(self, operator: str, right: Expression):
		assert isinstance(operator, str)
		assert isinstance(right, Expression), right
		self.operator, self.right = operator, right
	def __str__(self): return "(%s%s)"%(self.operator, self.right)

class InfixExpression(Expression):
	def __init__(self, left: Expression, operator: str, right: Expression):
		assert isinstance(operator, str)
		assert isinstance(left, Expression), left
		assert isinstance(right, Expression), right
		self.left, self.operator, self.right = left, operator, right
	def __str__(self): return "(%s %s %s)"%(self.left, self.operator, self.right)

class IfExpression(Expression):
	alternative: Optional[BlockStatement]
	def __init__(self, condition: Expression, consequence: BlockStatement, alternative: Optional[BlockStatement] = None):
		assert isinstance(condition, Expression), condition
		assert isinstance(consequence, BlockStatement), consequence
		assert alternative is None or isinstance(alternative, BlockStatement), alternative
		self.condition = condition
		self.consequence = consequence
		self.alternative = alternative
	def __str__(self):
		text = "if %s %s"%(self.condition, self.consequence)
		if self.alternative is not None:
			text += " else %s"%self.alternative
		return text

class IntegerLiteral(Expression):
	def __init__(self, value: int):
		# bool is a subclass of int, but a flag is not a number here.
		assert isinstance(value, int) and not isinstance(value, bool), value
		assert INT64_MIN <= value <= INT64_MAX, value
		self.value = value
	def __str__(self): return str(self.value)

class BooleanLiteral(Expression):
	def __init__(self, value: bool):
		assert isinstance(value, bool), value
		self.value = value
	def __str__(self): return "true" if self.value else "false"

