# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
AST → logic-assembly lowering.

Pipeline placement:
  AST (ast_nodes.py) → instructions with symbolic labels (this file)
    → label resolution (labels.py) → text (asm_printer.py)

Expression results land in the accumulator. Operands that are atoms (bare
literals or identifiers) are never loaded: their text is spliced straight
into the consuming instruction. When both sides of a binary operation need
computing, the left result is pushed onto the spill bank while the right
side is evaluated and popped back into `ebx` afterwards.

Control structures get labels from a single counter, so `.ifLbl<n>`,
`.contLbl<n>` and `.whileLbl<n>` never collide however deep they nest.

Functions take no arguments and return nothing: a declaration compiles its
body once and every call site splices in a copy of that code.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from . import ast_nodes as A
from . import asm_nodes as M
from .asm_parser import parse_line
from .errors import CodegenError
from .target import (
	ACC,
	DISPLAY,
	GENERAL_REGISTERS,
	MEMORY_BANK,
	MESSAGE,
	NULL,
	REG_B,
	STACK_PTR,
	binary_mnemonic,
)

logger = logging.getLogger(__name__)


class AsmBuilder:
	"""
	Helper that collects emitted instructions.

	Manages:
	- the current output buffer (swapped out while a function body compiles)
	- the unique-id counter behind synthesized label names
	- push/pop sequences on the spill bank
	"""

	def __init__(self) -> None:
		self.code: List[M.AsmInstr] = []
		self._uid_counter = 0

	def new_uid(self) -> int:
		"""Allocate the next id for a control structure's labels."""
		uid = self._uid_counter
		self._uid_counter += 1
		return uid

	def emit(self, instr: M.AsmInstr) -> None:
		self.code.append(instr)

	def emit_all(self, instrs: Tuple[M.AsmInstr, ...] | List[M.AsmInstr]) -> None:
		self.code.extend(instrs)

	def set_code(self, code: List[M.AsmInstr]) -> List[M.AsmInstr]:
		"""Switch the output buffer; returns the previous one."""
		prev = self.code
		self.code = code
		return prev

	def push(self, reg: str) -> None:
		self.emit(M.Write(value=reg, bank=MEMORY_BANK, addr=STACK_PTR))
		self.emit(M.Op(mnemonic="add", dest=STACK_PTR, left=STACK_PTR, right="1"))

	def pop(self, reg: str) -> None:
		self.emit(M.Op(mnemonic="sub", dest=STACK_PTR, left=STACK_PTR, right="1"))
		self.emit(M.Read(dest=reg, bank=MEMORY_BANK, addr=STACK_PTR))


class CodeGenerator:
	"""
	Lower a minasm AST into instructions using per-node visitors.

	Entry points:
	  - generate: whole program (register preamble, statements, `end`)
	  - lower_expr / lower_stmt / lower_block: fragments, appended to the builder

	One instance per compilation: the label counter and the function table
	live here and are never shared between runs.
	"""

	def __init__(self, builder: Optional[AsmBuilder] = None) -> None:
		self.b = builder or AsmBuilder()
		self._functions: Dict[str, Tuple[M.AsmInstr, ...]] = {}

	@property
	def code(self) -> List[M.AsmInstr]:
		return self.b.code

	@property
	def functions(self) -> Mapping[str, Tuple[M.AsmInstr, ...]]:
		"""Compiled function bodies by name (read-only view)."""
		return MappingProxyType(self._functions)

	def generate(self, program: A.Program) -> List[M.AsmInstr]:
		if not isinstance(program, A.Program):
			raise CodegenError(
				reason_code="unsupported-node",
				message=f"root node must be Program, got {type(program).__name__}",
				subject=type(program).__name__,
			)
		self.b.emit(M.Set(dest=STACK_PTR, value="0"))
		for reg in GENERAL_REGISTERS:
			self.b.emit(M.Set(dest=reg, value="0"))
		for stmt in program.statements:
			self.lower_stmt(stmt)
		self.b.emit(M.End())
		return self.b.code

	# --- Expression lowering ---

	def lower_expr(self, expr: A.Expr) -> None:
		"""Lower an expression; its value ends up in the accumulator."""
		method = getattr(self, f"_visit_expr_{type(expr).__name__}", None)
		if method is None:
			raise CodegenError(
				reason_code="unsupported-node",
				message=f"invalid expression found: {type(expr).__name__}",
				subject=type(expr).__name__,
			)
		method(expr)

	def _operand(self, expr: A.Expr) -> str:
		"""
		Return the operand text for `expr`: the atom's own text (nothing
		emitted), or the accumulator after lowering a compound expression.
		"""
		if A.is_atom(expr):
			return expr.text  # type: ignore[attr-defined]
		self.lower_expr(expr)
		return ACC

	def _visit_expr_Literal(self, expr: A.Literal) -> None:
		self.b.emit(M.Set(dest=ACC, value=expr.text))

	def _visit_expr_Name(self, expr: A.Name) -> None:
		self.b.emit(M.Set(dest=ACC, value=expr.text))

	def _visit_expr_Paren(self, expr: A.Paren) -> None:
		self.lower_expr(expr.expr)

	def _visit_expr_Call(self, expr: A.Call) -> None:
		body = self._functions.get(expr.name)
		if body is None:
			raise CodegenError(
				reason_code="unknown-function",
				message=f"unknown function: {expr.name}",
				subject=expr.name,
			)
		logger.debug("inlining function %s (%d instructions)", expr.name, len(body))
		self.b.emit_all(body)

	def _visit_expr_Unary(self, expr: A.Unary) -> None:
		arg = self._operand(expr.expr)
		if expr.op is A.UnaryOp.NEG:
			self.b.emit(M.Op(mnemonic="mul", dest=ACC, left="-1", right=arg))
		elif expr.op is A.UnaryOp.BIT_NOT:
			self.b.emit(M.Op(mnemonic="not", dest=ACC, left=arg, right=NULL))
		else:
			raise CodegenError(
				reason_code="unsupported-operator",
				message=f"unknown unary operator: {expr.op!r}",
				subject=str(expr.op),
			)

	def _visit_expr_Binary(self, expr: A.Binary) -> None:
		self._lower_binary(expr, ACC)

	def _lower_binary(self, expr: A.Binary, dest: str) -> None:
		"""
		Lower `left op right` into `dest` (the accumulator, or the target of an
		assignment, which then never goes through the accumulator).
		"""
		mnemonic = binary_mnemonic(expr.op)
		left_atom = A.is_atom(expr.left)
		right_atom = A.is_atom(expr.right)
		if left_atom and right_atom:
			left, right = expr.left.text, expr.right.text  # type: ignore[attr-defined]
		elif left_atom:
			self.lower_expr(expr.right)
			left, right = expr.left.text, ACC  # type: ignore[attr-defined]
		elif right_atom:
			self.lower_expr(expr.left)
			left, right = ACC, expr.right.text  # type: ignore[attr-defined]
		else:
			# Both sides compound: park the left value on the spill bank.
			self.lower_expr(expr.left)
			self.b.push(ACC)
			self.lower_expr(expr.right)
			self.b.pop(REG_B)
			left, right = REG_B, ACC
		self.b.emit(M.Op(mnemonic=mnemonic, dest=dest, left=left, right=right))

	def _visit_expr_Assign(self, expr: A.Assign) -> None:
		if A.is_atom(expr.value):
			self.b.emit(M.Set(dest=expr.name, value=expr.value.text))  # type: ignore[attr-defined]
			return
		if isinstance(expr.value, A.Binary):
			self._lower_binary(expr.value, expr.name)
			return
		self.lower_expr(expr.value)
		self.b.emit(M.Set(dest=expr.name, value=ACC))

	def _visit_expr_SelfAssign(self, expr: A.SelfAssign) -> None:
		if expr.op is A.SelfAssignOp.ADD:
			mnemonic = "add"
		elif expr.op is A.SelfAssignOp.SUB:
			mnemonic = "sub"
		else:
			raise CodegenError(
				reason_code="unsupported-operator",
				message=f"unknown self-assignment operator: {expr.op!r}",
				subject=str(expr.op),
			)
		arg = self._operand(expr.value)
		self.b.emit(M.Op(mnemonic=mnemonic, dest=expr.name, left=expr.name, right=arg))

	def _visit_expr_Sensor(self, expr: A.Sensor) -> None:
		self.b.emit(M.Sensor(dest=ACC, entity=expr.block, attr=f"@{expr.attr}"))

	# --- Statement lowering ---

	def lower_stmt(self, stmt: A.Stmt) -> None:
		method = getattr(self, f"_visit_stmt_{type(stmt).__name__}", None)
		if method is None:
			raise CodegenError(
				reason_code="unsupported-node",
				message=f"invalid statement found: {type(stmt).__name__}",
				subject=type(stmt).__name__,
			)
		method(stmt)

	def lower_block(self, block: A.Block) -> None:
		for stmt in block.statements:
			self.lower_stmt(stmt)

	def _visit_stmt_Block(self, stmt: A.Block) -> None:
		self.lower_block(stmt)

	def _visit_stmt_ExprStmt(self, stmt: A.ExprStmt) -> None:
		# Evaluate and discard
		self.lower_expr(stmt.expr)

	def _visit_stmt_Print(self, stmt: A.Print) -> None:
		for arg in stmt.args:
			self.b.emit(M.Print(value=self._operand(arg)))
		self.b.emit(M.PrintFlush(sink=MESSAGE))

	def _visit_stmt_Draw(self, stmt: A.Draw) -> None:
		shape, *args = (atom.text for atom in stmt.args)
		self.b.emit(M.Draw(shape=shape, args=tuple(args)))

	def _visit_stmt_DrawFlush(self, stmt: A.DrawFlush) -> None:
		self.b.emit(M.DrawFlush(sink=DISPLAY))

	def _visit_stmt_Asm(self, stmt: A.Asm) -> None:
		# Raw `label`/`jump` lines come back structured so they still link.
		self.b.emit(parse_line(stmt.source[1:-1]))

	def _visit_stmt_FunctionDecl(self, stmt: A.FunctionDecl) -> None:
		outer = self.b.set_code([])
		try:
			self.lower_block(stmt.body)
		finally:
			body = self.b.set_code(outer)
		if stmt.name in self._functions:
			logger.debug("function %s redeclared; later body replaces the earlier one", stmt.name)
		self._functions[stmt.name] = tuple(body)
		logger.debug("compiled function %s (%d instructions)", stmt.name, len(body))

	def _visit_stmt_If(self, stmt: A.If) -> None:
		self.lower_expr(stmt.cond)
		if_label = f".ifLbl{self.b.new_uid()}"
		self.b.emit(M.Jump(target=if_label, cond="equal", left=ACC, right="0"))
		self.lower_block(stmt.then_body)
		self.b.emit(M.LabelDef(name=if_label))

	def _visit_stmt_IfElse(self, stmt: A.IfElse) -> None:
		self.lower_expr(stmt.cond)
		uid = self.b.new_uid()
		if_label = f".ifLbl{uid}"
		cont_label = f".contLbl{uid}"
		self.b.emit(M.Jump(target=if_label, cond="equal", left=ACC, right="0"))
		self.lower_block(stmt.then_body)
		self.b.emit(M.Jump(target=cont_label))
		self.b.emit(M.LabelDef(name=if_label))
		self.lower_block(stmt.else_body)
		self.b.emit(M.LabelDef(name=cont_label))

	def _visit_stmt_While(self, stmt: A.While) -> None:
		uid = self.b.new_uid()
		while_label = f".whileLbl{uid}"
		cont_label = f".contLbl{uid}"
		self.b.emit(M.LabelDef(name=while_label))
		self.lower_expr(stmt.cond)
		self.b.emit(M.Jump(target=cont_label, cond="equal", left=ACC, right="0"))
		self.lower_block(stmt.body)
		self.b.emit(M.Jump(target=while_label))
		self.b.emit(M.LabelDef(name=cont_label))

	def _visit_stmt_LabelStmt(self, stmt: A.LabelStmt) -> None:
		self.b.emit(M.LabelDef(name=stmt.name))

	def _visit_stmt_Goto(self, stmt: A.Goto) -> None:
		self.b.emit(M.Jump(target=stmt.name))


__all__ = ["AsmBuilder", "CodeGenerator"]
