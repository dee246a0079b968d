# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Fixed identifiers of the target machine.

These are baked into the generated code and are not configurable: the
downstream engine links `bank1`, `message1` and `display1` by name.
"""

from __future__ import annotations

from typing import Dict

from .ast_nodes import BinaryOp
from .errors import CodegenError

# Registers
ACC = "eax"
REG_B = "ebx"
REG_C = "ecx"
REG_D = "edx"
STACK_PTR = "bp"

GENERAL_REGISTERS = (ACC, REG_B, REG_C, REG_D)

# Linked blocks
MEMORY_BANK = "bank1"
MESSAGE = "message1"
DISPLAY = "display1"

# Placeholder for unused operand slots.
NULL = "null"

BINARY_MNEMONICS: Dict[BinaryOp, str] = {
	BinaryOp.POW: "pow",
	BinaryOp.MUL: "mul",
	BinaryOp.DIV: "div",
	BinaryOp.MOD: "mod",
	BinaryOp.ADD: "add",
	BinaryOp.SUB: "sub",
	BinaryOp.SHL: "lshift",
	BinaryOp.SHR: "rshift",
	BinaryOp.LT: "lessThan",
	BinaryOp.GT: "greaterThan",
	BinaryOp.LE: "lessThanEq",
	BinaryOp.GE: "greaterThanEq",
	BinaryOp.EQ: "equal",
	BinaryOp.NE: "notEqual",
	BinaryOp.BIT_AND: "and",
	BinaryOp.BIT_XOR: "xor",
	BinaryOp.BIT_OR: "or",
	BinaryOp.AND: "land",
}


def binary_mnemonic(op: object) -> str:
	"""Map a binary operator to its `op` mnemonic; anything else is fatal."""
	mnemonic = BINARY_MNEMONICS.get(op) if isinstance(op, BinaryOp) else None
	if mnemonic is None:
		raise CodegenError(
			reason_code="unsupported-operator",
			message=f"unknown binary operator: {op!r}",
			subject=str(op),
		)
	return mnemonic


__all__ = [
	"ACC",
	"REG_B",
	"REG_C",
	"REG_D",
	"STACK_PTR",
	"GENERAL_REGISTERS",
	"MEMORY_BANK",
	"MESSAGE",
	"DISPLAY",
	"NULL",
	"BINARY_MNEMONICS",
	"binary_mnemonic",
]
