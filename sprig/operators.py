"""
Prefix and infix operator rules over run-time values.
Failures come back as Error values; nothing in here raises on bad input.
"""
import operator
from .objects import (
	Object, Integer, Error, ObjectType,
	TRUE, FALSE, NULL, native_bool, wrap_int64,
)

def new_error(fmt:str, *args) -> Error:
	return Error(fmt % args)

def _divide(a:int, b:int) -> int:
	# Truncate toward zero, not toward negative infinity.
	q = abs(a) // abs(b)
	return q if (a < 0) == (b < 0) else -q

INTEGER_ARITHMETIC = {
	"+" : operator.add,
	"-" : operator.sub,
	"*" : operator.mul,
	"/" : _divide,
}
INTEGER_COMPARISON = {
	"<" : operator.lt,
	">" : operator.gt,
	"==" : operator.eq,
	"!=" : operator.ne,
}

###############################################################################

def evaluate_prefix(op:str, right:Object) -> Object:
	if op == "!": return _bang(right)
	if op == "-": return _minus(right)
	return new_error("unknown operator: %s%s", op, right.type())

def _bang(right:Object) -> Object:
	if right is TRUE: return FALSE
	if right is FALSE: return TRUE
	if right is NULL: return TRUE
	return FALSE

def _minus(right:Object) -> Object:
	if right.type() is not ObjectType.INTEGER:
		return new_error("unknown operator: -%s", right.type())
	return Integer(wrap_int64(-right.value))

###############################################################################

def evaluate_infix(op:str, left:Object, right:Object) -> Object:
	lt, rt = left.type(), right.type()
	if lt is ObjectType.INTEGER and rt is ObjectType.INTEGER:
		return _integer_infix(op, left, right)
	if lt is not rt:
		return new_error("type mismatch: %s %s %s", lt, op, rt)
	# Same type, not integers: flags and null are singletons, so identity is equality.
	if op == "==": return native_bool(left is right)
	if op == "!=": return native_bool(left is not right)
	return new_error("unknown operator: %s %s %s", lt, op, rt)

def _integer_infix(op:str, left:Integer, right:Integer) -> Object:
	a, b = left.value, right.value
	if op in INTEGER_ARITHMETIC:
		if op == "/" and b == 0:
			return new_error("division by zero: %d / %d", a, b)
		return Integer(wrap_int64(INTEGER_ARITHMETIC[op](a, b)))
	if op in INTEGER_COMPARISON:
		return native_bool(INTEGER_COMPARISON[op](a, b))
	return new_error("unknown operator: %s %s %s", left.type(), op, right.type())

