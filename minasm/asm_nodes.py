# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Target instruction nodes.

One frozen dataclass per opcode of the logic-assembly ISA, plus two
pseudo-instructions that only exist before label resolution:

- `LabelDef`: marks a jump target; removed by the resolver.
- `Jump` (and `RawJump`) with a `str` target: symbolic; the resolver swaps in
  the `int` index.

Nodes carry operands as text, exactly as they appear in the final listing.
Rendering lives in asm_printer, parsing of listing text in asm_parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .target import NULL


class AsmInstr:
	"""Base class for every emitted line (real or pseudo instruction)."""
	pass


@dataclass(frozen=True)
class Set(AsmInstr):
	"""dest = value"""
	dest: str
	value: str


@dataclass(frozen=True)
class Op(AsmInstr):
	"""dest = left <mnemonic> right (right is `null` for unary ops)"""
	mnemonic: str
	dest: str
	left: str
	right: str


@dataclass(frozen=True)
class Write(AsmInstr):
	"""bank[addr] = value"""
	value: str
	bank: str
	addr: str


@dataclass(frozen=True)
class Read(AsmInstr):
	"""dest = bank[addr]"""
	dest: str
	bank: str
	addr: str


@dataclass(frozen=True)
class Jump(AsmInstr):
	"""
	Transfer control to `target` when `left <cond> right` holds.

	`target` is a label name until resolution and a zero-based line index after.
	"""
	target: Union[str, int]
	cond: str = "always"
	left: str = NULL
	right: str = NULL

	@property
	def resolved(self) -> bool:
		return isinstance(self.target, int)


@dataclass(frozen=True)
class RawJump(AsmInstr):
	"""
	`jump <target> ...` from hand-written assembly whose operands are not the
	usual `cond left right` triple. Operands are kept as written; only the
	target takes part in resolution.
	"""
	target: Union[str, int]
	operands: Tuple[str, ...] = ()

	@property
	def resolved(self) -> bool:
		return isinstance(self.target, int)


@dataclass(frozen=True)
class LabelDef(AsmInstr):
	name: str


@dataclass(frozen=True)
class Print(AsmInstr):
	value: str


@dataclass(frozen=True)
class PrintFlush(AsmInstr):
	sink: str


@dataclass(frozen=True)
class Draw(AsmInstr):
	shape: str
	args: Tuple[str, ...]


@dataclass(frozen=True)
class DrawFlush(AsmInstr):
	sink: str


@dataclass(frozen=True)
class Sensor(AsmInstr):
	"""dest = entity.attr (attr already carries its `@` sigil)"""
	dest: str
	entity: str
	attr: str


@dataclass(frozen=True)
class End(AsmInstr):
	pass


@dataclass(frozen=True)
class Raw(AsmInstr):
	"""Verbatim line from an inline `asm(...)` statement or a parsed listing."""
	text: str


__all__ = [
	"AsmInstr",
	"Set",
	"Op",
	"Write",
	"Read",
	"Jump",
	"RawJump",
	"LabelDef",
	"Print",
	"PrintFlush",
	"Draw",
	"DrawFlush",
	"Sensor",
	"End",
	"Raw",
]
