# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
boundaryc.transform: the client/server boundary reference pass.

Per module, strictly in order:
  directives: classify the directive prologue (None / client / server)
  exports: collect the static export surface
  manifest: derive the module reference id and record `{entryPoint, exports}`
  rewrite: replace the body with a client proxy or server registrations

`transform_module` in `pipeline` drives the four steps.
"""

from .unit import MANIFEST_METADATA_KEY, BoundaryKind, ModuleUnit
from .directives import scan_directives
from .exports import collect_exports
from .manifest import ManifestRecord, module_reference_id, record_manifest
from .rewrite import rewrite_module
from .pipeline import PassResult, transform_module

__all__ = [
	"MANIFEST_METADATA_KEY",
	"BoundaryKind",
	"ModuleUnit",
	"scan_directives",
	"collect_exports",
	"ManifestRecord",
	"module_reference_id",
	"record_manifest",
	"rewrite_module",
	"PassResult",
	"transform_module",
]
