# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from boundaryc.core.errors import BoundaryError, ConflictingBoundaryDirectives
from boundaryc.estree import nodes as N
from boundaryc.test_support import make_program
from boundaryc.transform import BoundaryKind, scan_directives


def _directives(*values: str) -> list[N.Directive]:
	return make_program(directives=values).directives


def test_no_directives_is_none() -> None:
	assert scan_directives([]) is BoundaryKind.NONE


def test_unrelated_directives_are_ignored() -> None:
	assert scan_directives(_directives("use strict", "use asm")) is BoundaryKind.NONE


def test_use_client_anywhere_in_prologue() -> None:
	assert scan_directives(_directives("use strict", "use client")) is BoundaryKind.CLIENT


def test_use_server() -> None:
	assert scan_directives(_directives("use server")) is BoundaryKind.SERVER


def test_directive_text_must_match_exactly() -> None:
	assert scan_directives(_directives("use  client", "Use Server", "use server ")) is BoundaryKind.NONE


def test_both_directives_conflict_with_location() -> None:
	with pytest.raises(ConflictingBoundaryDirectives) as exc:
		scan_directives(_directives("use client", "use strict", "use server"), filename="/app/a.js")
	err = exc.value
	assert isinstance(err, BoundaryError)
	assert err.reason_code == "conflicting-boundary-directives"
	# Points at the later of the two directives.
	assert err.span.line == 3
	assert err.span.file == "/app/a.js"
	assert "use client" in err.message and "use server" in err.message
