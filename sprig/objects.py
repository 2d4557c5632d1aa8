"""
This module defines the run-time values that evaluation produces.

Every value knows its type-tag and how to render itself for a human.
Values never change once built. Flags and null are canonical:
There is exactly one TRUE, one FALSE, and one NULL in the whole process,
so identity is a sound equality test for those three (and only those three).
"""
from abc import ABC, abstractmethod
from enum import Enum

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

def wrap_int64(n:int) -> int:
	""" Fold an arbitrary Python int into the two's-complement 64-bit range, as native arithmetic would. """
	return ((n - INT64_MIN) & 0xFFFF_FFFF_FFFF_FFFF) + INT64_MIN

class ObjectType(str, Enum):
	INTEGER = "INTEGER"
	BOOLEAN = "BOOLEAN"
	NULL = "NULL"
	RETURN_VALUE = "RETURN_VALUE"
	ERROR = "ERROR"

	def __str__(self): return self.value

class Object(ABC):
	""" Root for all run-time values. """
	__slots__ = ()

	@abstractmethod
	def type(self) -> ObjectType: pass

	@abstractmethod
	def inspect(self) -> str: pass

	def __setattr__(self, key, value):
		raise AttributeError("%s objects are immutable"%type(self).__name__)

	def __delattr__(self, key):
		raise AttributeError("%s objects are immutable"%type(self).__name__)

	def __repr__(self): return "<%s %s>"%(self.type(), self.inspect())

class Integer(Object):
	__slots__ = ("value",)
	def __init__(self, value:int):
		assert isinstance(value, int) and not isinstance(value, bool), value
		assert INT64_MIN <= value <= INT64_MAX, value
		object.__setattr__(self, "value", value)
	def type(self): return ObjectType.INTEGER
	def inspect(self): return str(self.value)

class _Boolean(Object):
	""" Only ever instantiated twice. Use TRUE, FALSE, or native_bool. """
	__slots__ = ("value",)
	def __init__(self, value:bool):
		object.__setattr__(self, "value", value)
	def type(self): return ObjectType.BOOLEAN
	def inspect(self): return "true" if self.value else "false"

class _Null(Object):
	""" Only ever instantiated once. Use NULL. """
	__slots__ = ()
	def type(self): return ObjectType.NULL
	def inspect(self): return "null"

class ReturnValue(Object):
	"""
	The signal a return-statement leaves behind.
	Blocks pass it along untouched; only a whole program unwraps it.
	"""
	__slots__ = ("value",)
	def __init__(self, value:Object):
		assert isinstance(value, Object), value
		object.__setattr__(self, "value", value)
	def type(self): return ObjectType.RETURN_VALUE
	def inspect(self): return self.value.inspect()

class Error(Object):
	""" Just a message. No position, no code. """
	__slots__ = ("message",)
	def __init__(self, message:str):
		assert isinstance(message, str), message
		object.__setattr__(self, "message", message)
	def type(self): return ObjectType.ERROR
	def inspect(self): return "ERROR: " + self.message


TRUE = _Boolean(True)
FALSE = _Boolean(False)
NULL = _Null()

def native_bool(flag:bool) -> _Boolean:
	return TRUE if flag else FALSE

def is_error(obj:Object) -> bool:
	return obj.type() is ObjectType.ERROR

def is_truthy(obj:Object) -> bool:
	""" Null and false are falsy. Everything else, zero included, is truthy. """
	return not (obj is NULL or obj is FALSE)

