"""
Common diagnostic structure for the pass and driver.

A message plus optional span/metadata. Pass failures are raised as
`BoundaryError`s and converted into diagnostics at the driver boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a compiler diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	# Diagnostic phase label: "boundary" for pass failures, "estree" for
	# malformed input trees, "printer" for output rendering gaps.
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Source location (Span() denotes unknown).
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		# Normalize missing spans to the sentinel Span() so downstream tooling
		# can rely on a structured object instead of None.
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def format_human(self, default_file: str | None = None) -> str:
		file = self.span.file or default_file or "<unknown>"
		return f"{file}:{self.span.format_position()}: {self.severity}: {self.message}"

	def to_dict(self, default_file: str | None = None) -> dict[str, Any]:
		return {
			"phase": self.phase,
			"code": self.code,
			"message": self.message,
			"severity": self.severity,
			"file": self.span.file or default_file,
			"line": self.span.line,
			"column": self.span.column,
			"notes": list(self.notes),
		}
