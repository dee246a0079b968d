# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from typing import Iterable, List

from . import asm_nodes as M
from .errors import CodegenError


def format_instr(instr: M.AsmInstr) -> str:
	if isinstance(instr, M.Set):
		return f"set {instr.dest} {instr.value}"
	if isinstance(instr, M.Op):
		return f"op {instr.mnemonic} {instr.dest} {instr.left} {instr.right}"
	if isinstance(instr, M.Write):
		return f"write {instr.value} {instr.bank} {instr.addr}"
	if isinstance(instr, M.Read):
		return f"read {instr.dest} {instr.bank} {instr.addr}"
	if isinstance(instr, M.Jump):
		return f"jump {instr.target} {instr.cond} {instr.left} {instr.right}"
	if isinstance(instr, M.RawJump):
		return " ".join(("jump", str(instr.target), *instr.operands))
	if isinstance(instr, M.LabelDef):
		return f"label {instr.name}"
	if isinstance(instr, M.Print):
		return f"print {instr.value}"
	if isinstance(instr, M.PrintFlush):
		return f"printflush {instr.sink}"
	if isinstance(instr, M.Draw):
		return " ".join(("draw", instr.shape, *instr.args))
	if isinstance(instr, M.DrawFlush):
		return f"drawflush {instr.sink}"
	if isinstance(instr, M.Sensor):
		return f"sensor {instr.dest} {instr.entity} {instr.attr}"
	if isinstance(instr, M.End):
		return "end"
	if isinstance(instr, M.Raw):
		return instr.text
	raise CodegenError(
		reason_code="unsupported-node",
		message=f"cannot print instruction {type(instr).__name__}",
		subject=type(instr).__name__,
	)


def format_code(code: Iterable[M.AsmInstr]) -> List[str]:
	return [format_instr(instr) for instr in code]


__all__ = ["format_instr", "format_code"]
