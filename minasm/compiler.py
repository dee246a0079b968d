# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Compilation pipeline for one program:

  Program (AST) -> CodeGenerator -> resolve_labels -> text lines

Reading source files and parsing them into the AST is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from . import ast_nodes as A
from .asm_printer import format_code
from .codegen import CodeGenerator
from .labels import resolve_labels

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompileOptions:
	# When False, label definitions and symbolic jump targets are kept in the
	# output (the generator's own listing form).
	resolve_labels: bool = True


def compile_program(program: A.Program, options: Optional[CompileOptions] = None) -> List[str]:
	"""
	Compile `program` into listing lines.

	Each call uses a fresh CodeGenerator, so label numbering and the function
	table never leak between compilations. Any CodegenError or
	LabelResolutionError aborts the whole compilation.
	"""
	opts = options or CompileOptions()
	gen = CodeGenerator()
	code = gen.generate(program)
	logger.debug(
		"generated %d instructions (%d functions declared)", len(code), len(gen.functions)
	)
	if opts.resolve_labels:
		code = resolve_labels(code)
	return format_code(code)


def render_listing(lines: Iterable[str]) -> str:
	"""Join listing lines into output text, one newline-terminated line each."""
	return "".join(f"{line}\n" for line in lines)


__all__ = ["CompileOptions", "compile_program", "render_listing"]
