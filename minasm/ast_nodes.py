# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source-language AST consumed by the code generator.

The front end is external: it hands over an already validated tree built
from these classes. The node set is closed; the code generator has one
visitor per concrete class below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


# Base node kinds

class Node:
	"""Base class for all AST nodes."""
	pass


class Expr(Node):
	"""Base class for all expressions."""
	pass


class Stmt(Node):
	"""Base class for all statements."""
	pass


# Operator enums

class UnaryOp(Enum):
	NEG = auto()      # -x
	BIT_NOT = auto()  # ~x


class BinaryOp(Enum):
	POW = auto()

	MUL = auto()
	DIV = auto()
	MOD = auto()

	ADD = auto()
	SUB = auto()

	SHL = auto()
	SHR = auto()

	LT = auto()
	GT = auto()
	LE = auto()
	GE = auto()

	EQ = auto()
	NE = auto()

	BIT_AND = auto()
	BIT_XOR = auto()
	BIT_OR = auto()

	AND = auto()  # logical and (&&)


class SelfAssignOp(Enum):
	ADD = auto()  # x += e
	SUB = auto()  # x -= e


# Expressions

@dataclass
class Atom(Expr):
	"""
	Expression that needs no computation: its source text can be used directly
	as an instruction operand.
	"""
	text: str


@dataclass
class Literal(Atom):
	"""Number or quoted string, kept as source text (quotes included)."""
	pass


@dataclass
class Name(Atom):
	"""Bare identifier."""
	pass


@dataclass
class Call(Expr):
	"""Call of a previously declared, argument-less function (inlined)."""
	name: str


@dataclass
class Paren(Expr):
	expr: Expr


@dataclass
class Unary(Expr):
	op: UnaryOp
	expr: Expr


@dataclass
class Binary(Expr):
	op: BinaryOp
	left: Expr
	right: Expr


@dataclass
class Assign(Expr):
	name: str
	value: Expr


@dataclass
class SelfAssign(Expr):
	op: SelfAssignOp
	name: str
	value: Expr


@dataclass
class Sensor(Expr):
	"""`#block.attr`: read attribute `attr` off the entity named `block`."""
	block: str
	attr: str


# Statements

@dataclass
class Block(Stmt):
	statements: List[Stmt] = field(default_factory=list)


@dataclass
class ExprStmt(Stmt):
	expr: Expr


@dataclass
class Print(Stmt):
	args: List[Expr]


@dataclass
class Draw(Stmt):
	"""Drawing primitive: shape name followed by six arguments, all atoms."""
	args: List[Atom]


@dataclass
class DrawFlush(Stmt):
	pass


@dataclass
class Asm(Stmt):
	"""Inline target assembly; `source` is the string token, quotes included."""
	source: str


@dataclass
class FunctionDecl(Stmt):
	name: str
	body: Block


@dataclass
class If(Stmt):
	cond: Expr
	then_body: Block


@dataclass
class IfElse(Stmt):
	cond: Expr
	then_body: Block
	else_body: Block


@dataclass
class LabelStmt(Stmt):
	name: str


@dataclass
class Goto(Stmt):
	name: str


@dataclass
class While(Stmt):
	cond: Expr
	body: Block


@dataclass
class Program(Node):
	statements: List[Stmt] = field(default_factory=list)


def is_atom(expr: Expr) -> bool:
	"""True for a bare literal or identifier; a parenthesised atom is not one."""
	return isinstance(expr, (Literal, Name))


__all__ = [
	"Node",
	"Expr",
	"Stmt",
	"UnaryOp",
	"BinaryOp",
	"SelfAssignOp",
	"Atom",
	"Literal",
	"Name",
	"Call",
	"Paren",
	"Unary",
	"Binary",
	"Assign",
	"SelfAssign",
	"Sensor",
	"Block",
	"ExprStmt",
	"Print",
	"Draw",
	"DrawFlush",
	"Asm",
	"FunctionDecl",
	"If",
	"IfElse",
	"LabelStmt",
	"Goto",
	"While",
	"Program",
	"is_atom",
]
