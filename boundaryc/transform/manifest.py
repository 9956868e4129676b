# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Module reference ids and the per-module manifest record.

The reference id is the module's absolute location as a `file:` URL. The path
is made absolute lexically (no symlink resolution) and percent-encoded with
the WHATWG path percent-encode set plus `%` and `\\`, so the same location
always yields the same id.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence
from urllib.parse import quote

from boundaryc.core.errors import MissingFilePath

from .unit import MANIFEST_METADATA_KEY, ModuleUnit

logger = logging.getLogger(__name__)

# Printable ASCII left unescaped in a file URL path.
_URL_PATH_SAFE = "/!$&'()*+,-.:;=@[]^_|~"


def module_reference_id(filename: str) -> str:
	path = os.path.abspath(filename)
	if os.sep != "/":
		path = path.replace(os.sep, "/")
	if not path.startswith("/"):
		# Windows drive paths: `C:/x` -> `/C:/x`.
		path = "/" + path
	return "file://" + quote(path, safe=_URL_PATH_SAFE, encoding="utf-8")


@dataclass(frozen=True)
class ManifestRecord:
	entry_point: str
	exports: tuple[str, ...] = field(default_factory=tuple)

	def to_dict(self) -> Dict[str, Any]:
		return {"entryPoint": self.entry_point, "exports": list(self.exports)}


def record_manifest(unit: ModuleUnit, exports: Sequence[str]) -> ManifestRecord:
	"""
	Attach `{entryPoint, exports}` to the unit's metadata and return it.

	A record already present on the unit is kept as-is (a record is never
	revised within one compilation). Raises `MissingFilePath` when the unit has
	no file location.
	"""
	if not unit.filename:
		raise MissingFilePath(span=unit.program.loc)
	existing = unit.metadata.get(MANIFEST_METADATA_KEY)
	if isinstance(existing, ManifestRecord):
		return existing
	record = ManifestRecord(entry_point=module_reference_id(unit.filename), exports=tuple(exports))
	logger.debug("client references %s %s", unit.filename, list(record.exports))
	unit.metadata[MANIFEST_METADATA_KEY] = record
	return record
