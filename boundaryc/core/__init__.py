"""
boundaryc.core: shared span/diagnostic/error types used by every stage.

Modules:
  - span: best-effort source spans
  - diagnostics: Diagnostic record consumed by the driver
  - errors: structured pass failures with stable reason codes
"""

__all__ = [
    "span",
    "diagnostics",
    "errors",
]
