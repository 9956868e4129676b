# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Directive prologue classification.

Only the exact literals `"use client"` and `"use server"` are recognized;
their position within the prologue does not matter. Any other directive
(`"use strict"`, ...) is ignored.
"""

from __future__ import annotations

from typing import Optional, Sequence

from boundaryc.core.errors import ConflictingBoundaryDirectives
from boundaryc.core.span import Span
from boundaryc.estree.nodes import Directive

from .unit import BoundaryKind

USE_CLIENT = "use client"
USE_SERVER = "use server"


def _find(directives: Sequence[Directive], literal: str) -> Optional[Directive]:
	for d in directives:
		if d.value.value == literal:
			return d
	return None


def scan_directives(directives: Sequence[Directive], *, filename: str | None = None) -> BoundaryKind:
	"""
	Classify a module from its directive list.

	Raises `ConflictingBoundaryDirectives` when both boundary directives are
	present; the error points at whichever of the two comes later.
	"""
	client = _find(directives, USE_CLIENT)
	server = _find(directives, USE_SERVER)
	if client is not None and server is not None:
		later = client if directives.index(client) > directives.index(server) else server
		span = later.loc or Span()
		raise ConflictingBoundaryDirectives(span=span.with_file(filename), filename=filename)
	if client is not None:
		return BoundaryKind.CLIENT
	if server is not None:
		return BoundaryKind.SERVER
	return BoundaryKind.NONE
