# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
minasm: compiler from a small imperative language to logic assembly.

Pipeline:
  ast_nodes (AST from an external front end)
    → codegen (instructions with symbolic labels)
    → labels (numeric jump targets)
    → asm_printer (text listing)

Public API:
  - compile_program / render_listing / CompileOptions: whole-program pipeline
  - CodeGenerator: AST lowering, also usable on fragments
  - resolve_labels / resolve_text: the label resolver
  - MinasmError and its subclasses
"""

from .codegen import AsmBuilder, CodeGenerator
from .compiler import CompileOptions, compile_program, render_listing
from .errors import CodegenError, LabelResolutionError, MinasmError
from .labels import resolve_labels, resolve_text

__all__ = [
	"AsmBuilder",
	"CodeGenerator",
	"CompileOptions",
	"compile_program",
	"render_listing",
	"CodegenError",
	"LabelResolutionError",
	"MinasmError",
	"resolve_labels",
	"resolve_text",
]
