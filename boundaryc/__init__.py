# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
boundaryc: client/server boundary reference pass for ESTree module trees.

Subpackages:
  core: spans, diagnostics and structured pass errors
  estree: node model, JSON codec and JavaScript printer
  transform: directive scan, export collection, manifest record, rewrite
"""

__all__ = ["core", "estree", "transform"]
