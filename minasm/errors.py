# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Structured compiler errors.

Every problem detected by the code generator or the label resolver is fatal;
there are no warnings and no partial output. Errors carry a stable
`reason_code` so callers and tests can match on it without parsing messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MinasmError(Exception):
	"""Base error for the minasm pipeline."""

	reason_code: str
	message: str
	# Offending function/label/node name, when there is one.
	subject: str | None = None

	def __str__(self) -> str:
		return self.format_human()

	def to_dict(self) -> dict[str, Any]:
		return {"reason_code": self.reason_code, "message": self.message, "subject": self.subject}

	def format_human(self) -> str:
		return f"[{self.reason_code}] {self.message}"


class CodegenError(MinasmError):
	"""
	Semantic error raised while lowering the AST.

	reason codes: `unknown-function`, `unsupported-operator`, `unsupported-node`.
	"""


class LabelResolutionError(MinasmError):
	"""Linkage error raised by the label resolver (`undefined-label`)."""


__all__ = ["MinasmError", "CodegenError", "LabelResolutionError"]
