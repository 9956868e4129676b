# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from boundaryc.estree.nodes import Program

# Compile-unit metadata key the manifest record is stored under.
MANIFEST_METADATA_KEY = "clientReferences"


class BoundaryKind(Enum):
	NONE = "none"
	CLIENT = "client"
	SERVER = "server"


@dataclass
class ModuleUnit:
	"""
	One module as seen by the pass: its tree, its file location and the
	compile unit's side-channel metadata slot.

	The pass owns the unit for the duration of a call; it replaces
	`program.body` / `program.directives` wholesale when rewriting.
	"""

	program: Program
	filename: Optional[str] = None
	metadata: Dict[str, Any] = field(default_factory=dict)
