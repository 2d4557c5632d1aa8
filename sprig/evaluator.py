"""
The tree-walking evaluator proper.

One visit-method per kind of node. Errors are ordinary values here:
every place that evaluates a sub-node checks for an Error straight away
and hands it back unchanged, abandoning whatever it was about to do next.

Return-statements leave a ReturnValue behind. Blocks pass that along untouched,
however deeply they nest, and only the enclosing Program strips the wrapper.
"""
from typing import Optional
from boozetools.support.foundation import Visitor
from . import syntax
from .objects import Object, Integer, ReturnValue, ObjectType, NULL, native_bool, is_error, is_truthy
from .operators import evaluate_prefix, evaluate_infix
from .diagnostics import Report

class Evaluator(Visitor):
	def __init__(self, report:Optional[Report]=None):
		self._report = report

	def evaluate(self, node:syntax.Node) -> Object:
		result = self.visit(node)
		if self._report is not None and self._report.verbose:
			self._report.info("%s => %s"%(node, result.inspect()))
		return result

	def visit_Node(self, node:syntax.Node):
		# Reached only for node classes outside the closed set above.
		raise NotImplementedError(type(node), node)

	def visit_Program(self, node:syntax.Program) -> Object:
		result = NULL
		for statement in node.statements:
			result = self.evaluate(statement)
			if result.type() is ObjectType.RETURN_VALUE: return result.value
			if is_error(result): return result
		return result

	def visit_BlockStatement(self, node:syntax.BlockStatement) -> Object:
		result = NULL
		for statement in node.statements:
			result = self.evaluate(statement)
			if result.type() in (ObjectType.RETURN_VALUE, ObjectType.ERROR): return result
		return result

	def visit_ReturnStatement(self, node:syntax.ReturnStatement) -> Object:
		value = self.evaluate(node.return_value)
		if is_error(value): return value
		return ReturnValue(value)

	def visit_ExpressionStatement(self, node:syntax.ExpressionStatement) -> Object:
		return self.evaluate(node.expression)

	def visit_PrefixExpression(self, node:syntax.PrefixExpression) -> Object:
		right = self.evaluate(node.right)
		if is_error(right): return right
		return evaluate_prefix(node.operator, right)

	def visit_InfixExpression(self, node:syntax.InfixExpression) -> Object:
		left = self.evaluate(node.left)
		if is_error(left): return left
		right = self.evaluate(node.right)
		if is_error(right): return right
		return evaluate_infix(node.operator, left, right)

	def visit_IfExpression(self, node:syntax.IfExpression) -> Object:
		condition = self.evaluate(node.condition)
		if is_error(condition): return condition
		if is_truthy(condition): return self.evaluate(node.consequence)
		if node.alternative is not None: return self.evaluate(node.alternative)
		return NULL

	@staticmethod
	def visit_IntegerLiteral(node:syntax.IntegerLiteral) -> Object:
		return Integer(node.value)

	@staticmethod
	def visit_BooleanLiteral(node:syntax.BooleanLiteral) -> Object:
		return native_bool(node.value)

_DEFAULT = Evaluator()

def evaluate(node:syntax.Node) -> Object:
	""" The single entry point. Total over the node classes in `syntax`. """
	return _DEFAULT.evaluate(node)
