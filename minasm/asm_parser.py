# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Logic-assembly text → instruction nodes.

Only the line shapes the label resolver cares about get a structured node:

  label <name> ...                → LabelDef (trailing fields dropped)
  jump <target> <cond> <a> <b>    → Jump (an all-digit target is already resolved)
  jump <target> ...               → RawJump (any other operand list, kept as is)

Every other line is kept verbatim as `Raw`, so quoted strings and spacing in
inline assembly survive a parse/print round trip untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from lark import Lark, Token

from . import asm_nodes as M

_GRAMMAR_PATH = Path(__file__).with_name("asm.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	maybe_placeholders=False,
)


def _fields(text: str) -> List[Token]:
	tree = _PARSER.parse(text)
	return [tok for tok in tree.children if isinstance(tok, Token)]


def _jump_target(raw: str) -> str | int:
	if raw.isascii() and raw.isdigit():
		return int(raw)
	return raw


def parse_line(text: str) -> M.AsmInstr:
	"""Parse a single listing line into an instruction node."""
	fields = _fields(text)
	# The opcode and the label name / jump target are never quoted strings.
	if len(fields) < 2 or any(tok.type != "FIELD" for tok in fields[:2]):
		return M.Raw(text)
	opcode, name = fields[0].value, fields[1].value
	if opcode == "label":
		# Anything after the name is ignored.
		return M.LabelDef(name)
	if opcode == "jump":
		target = _jump_target(name)
		rest = fields[2:]
		if len(rest) == 3 and all(tok.type == "FIELD" for tok in rest):
			cond, left, right = (tok.value for tok in rest)
			return M.Jump(target, cond, left, right)
		return M.RawJump(target, tuple(tok.value for tok in rest))
	return M.Raw(text)


def parse_listing(text: str) -> List[M.AsmInstr]:
	"""Parse a multi-line listing; blank lines are skipped."""
	return [parse_line(line.strip()) for line in text.splitlines() if line.strip()]


__all__ = ["parse_line", "parse_listing"]
