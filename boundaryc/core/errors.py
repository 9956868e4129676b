# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .diagnostics import Diagnostic
from .span import Span


@dataclass(eq=False)
class BoundaryError(Exception):
	"""
	A structured, serializable failure of the boundary pass.

	Every failure is fatal for the module being processed and carries a stable
	reason code plus the best source location available.
	"""

	reason_code: str
	message: str
	span: Span = field(default_factory=Span)
	filename: str | None = None

	def __str__(self) -> str:
		return self.format_human()

	def to_dict(self) -> dict[str, Any]:
		return {
			"reason_code": self.reason_code,
			"message": self.message,
			"file": self.span.file or self.filename,
			"line": self.span.line,
			"column": self.span.column,
		}

	def format_human(self) -> str:
		parts: list[str] = [f"[{self.reason_code}] {self.message}"]
		file = self.span.file or self.filename
		if file:
			parts.append(f"file={file}")
		if self.span.line is not None:
			parts.append(f"at={self.span.format_position()}")
		return " ".join(parts)

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(
			message=self.message,
			code=self.reason_code,
			phase="boundary",
			span=self.span.with_file(self.filename),
		)


class ConflictingBoundaryDirectives(BoundaryError):
	"""A module declares both the client and the server boundary directive."""

	def __init__(self, *, span: Span | None = None, filename: str | None = None) -> None:
		super().__init__(
			reason_code="conflicting-boundary-directives",
			message="It's not possible to have both `use client` and `use server` directives in the same file.",
			span=span or Span(),
			filename=filename,
		)


class MissingFilePath(BoundaryError):
	"""The module has a boundary directive but no file location to derive its reference id from."""

	def __init__(self, *, span: Span | None = None) -> None:
		super().__init__(
			reason_code="missing-file-path",
			message="Expected a filename to be set on the module unit",
			span=span or Span(),
			filename=None,
		)


class EstreeFormatError(ValueError):
	"""Raised when an ESTree JSON document cannot be decoded into nodes."""


class UnsupportedNodeError(ValueError):
	"""Raised when the printer meets a node kind it cannot render."""

	def __init__(self, node_type: str) -> None:
		super().__init__(f"cannot print node of type '{node_type}'")
		self.node_type = node_type


__all__ = [
	"BoundaryError",
	"ConflictingBoundaryDirectives",
	"MissingFilePath",
	"EstreeFormatError",
	"UnsupportedNodeError",
]
