# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Boundary reference pass driver (one module per call).

    scan directives -> (no directive: done)
                    -> collect exports -> record manifest -> rewrite body

State per module: Unscanned -> NoBoundary | Conflict (raised) |
Client/Server -> Recorded -> Rewritten. Whether the last step runs is decided
by `PassConfig.should_rewrite()`; the manifest is recorded either way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from boundaryc.config import PassConfig

from .directives import scan_directives
from .exports import collect_exports
from .manifest import ManifestRecord, record_manifest
from .rewrite import rewrite_module
from .unit import BoundaryKind, ModuleUnit

logger = logging.getLogger(__name__)


@dataclass
class PassResult:
	unit: ModuleUnit
	kind: BoundaryKind
	manifest: Optional[ManifestRecord] = None
	rewritten: bool = False


def transform_module(unit: ModuleUnit, config: PassConfig | None = None) -> PassResult:
	"""
	Run the boundary pass over `unit`.

	Raises `ConflictingBoundaryDirectives` or `MissingFilePath`; on failure the
	unit is left untouched.
	"""
	config = config or PassConfig()
	kind = scan_directives(unit.program.directives, filename=unit.filename)
	if kind is BoundaryKind.NONE:
		return PassResult(unit=unit, kind=kind)

	exports = collect_exports(unit.program)
	record = record_manifest(unit, exports)

	if not config.should_rewrite():
		logger.debug("%s: %s boundary recorded, body left intact", unit.filename, kind.value)
		return PassResult(unit=unit, kind=kind, manifest=record)

	rewrite_module(unit, kind, record.entry_point, config)
	logger.debug("%s: %s boundary rewritten", unit.filename, kind.value)
	return PassResult(unit=unit, kind=kind, manifest=record, rewritten=True)
