# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Label resolution: the assembler step between code generation and output.

Two passes, in this order:

1. Drop every `LabelDef`, recording `name -> index of the next instruction`
   in the label-free numbering. A label with nothing after it maps to the
   final length of the listing.
2. Rewrite every symbolic `Jump` or `RawJump` target to the recorded index.

A label defined twice keeps its last position; this is not reported.
Jumps that already carry an `int` target are left alone, which makes the
pass idempotent.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Sequence

from . import asm_nodes as M
from .asm_parser import parse_line
from .asm_printer import format_code
from .errors import LabelResolutionError

logger = logging.getLogger(__name__)


def collect_labels(code: Sequence[M.AsmInstr]) -> tuple[List[M.AsmInstr], Dict[str, int]]:
	"""First pass: strip label definitions and map each name to its index."""
	labels: Dict[str, int] = {}
	stripped: List[M.AsmInstr] = []
	for instr in code:
		if isinstance(instr, M.LabelDef):
			if instr.name in labels:
				logger.debug("label %s redefined at %d (was %d)", instr.name, len(stripped), labels[instr.name])
			labels[instr.name] = len(stripped)
			continue
		stripped.append(instr)
	return stripped, labels


def resolve_labels(code: Sequence[M.AsmInstr]) -> List[M.AsmInstr]:
	"""Return `code` without label definitions and with numeric jump targets."""
	stripped, labels = collect_labels(code)
	logger.debug("resolving %d labels over %d instructions", len(labels), len(stripped))
	resolved: List[M.AsmInstr] = []
	for instr in stripped:
		if isinstance(instr, (M.Jump, M.RawJump)) and not instr.resolved:
			if instr.target not in labels:
				raise LabelResolutionError(
					reason_code="undefined-label",
					message=f"invalid jump to label '{instr.target}'",
					subject=str(instr.target),
				)
			instr = replace(instr, target=labels[instr.target])
		resolved.append(instr)
	return resolved


def resolve_text(lines: Iterable[str]) -> List[str]:
	"""Resolve a listing given as text lines (e.g. hand-written assembly)."""
	return format_code(resolve_labels([parse_line(line) for line in lines]))


__all__ = ["collect_labels", "resolve_labels", "resolve_text"]
