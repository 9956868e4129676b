# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lightweight source span representation used by diagnostics.

A Span carries optional file/line/column info when available. ESTree trees
describe locations as `{"start": {"line", "column"}, "end": {...}}` objects;
`Span.from_estree_loc` understands that shape, `Span.from_loc` accepts any
object with line/column attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source span (best-effort file/line/column plus raw loc)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None
	raw: Any = None

	@classmethod
	def from_loc(cls, loc: Any) -> "Span":
		"""
		Construct a Span from an existing location object.

		If `loc` is already a Span, it is returned unchanged; otherwise the
		object is stored in `raw` so richer renderers can recover it.
		"""
		if loc is None:
			return cls()
		if isinstance(loc, cls):
			return loc
		return cls(
			file=getattr(loc, "file", None) or getattr(loc, "filename", None) or None,
			line=getattr(loc, "line", None),
			column=getattr(loc, "column", None),
			end_line=getattr(loc, "end_line", None),
			end_column=getattr(loc, "end_column", None),
			raw=loc,
		)

	@classmethod
	def from_estree_loc(cls, loc: Mapping[str, Any] | None) -> "Span | None":
		"""Decode an ESTree `loc` object; returns None when no location is present."""
		if not isinstance(loc, Mapping):
			return None
		start = loc.get("start") if isinstance(loc.get("start"), Mapping) else {}
		end = loc.get("end") if isinstance(loc.get("end"), Mapping) else {}
		filename = loc.get("filename")
		return cls(
			file=filename if isinstance(filename, str) and filename else None,
			line=start.get("line"),
			column=start.get("column"),
			end_line=end.get("line"),
			end_column=end.get("column"),
		)

	def to_estree_loc(self) -> dict[str, Any]:
		out: dict[str, Any] = {
			"start": {"line": self.line, "column": self.column},
			"end": {"line": self.end_line, "column": self.end_column},
		}
		if self.file:
			out["filename"] = self.file
		return out

	def with_file(self, file: str | None) -> "Span":
		"""Attach a filename when the span does not already carry one."""
		if self.file or not file:
			return self
		return replace(self, file=file)

	def format_position(self) -> str:
		"""`line:column` with `?` placeholders for unknown parts."""
		line = "?" if self.line is None else str(self.line)
		column = "?" if self.column is None else str(self.column)
		return f"{line}:{column}"


__all__ = ["Span"]
