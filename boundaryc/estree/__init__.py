"""
boundaryc.estree: in-memory ESTree/Babel node model.

Modules:
  - nodes: dataclass node types for the subset the pass reads or builds
  - codec: ESTree JSON <-> nodes
  - printer: nodes -> JavaScript source
"""

__all__ = ["nodes", "codec", "printer"]
