# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
boundaryc command line driver.

Reads one or more ESTree JSON documents (Babel `File`/`Program` or acorn
`Program`), runs the boundary pass over each, and emits either JavaScript
source or the rewritten ESTree JSON. A failing module does not stop the
others; the exit code is 1 when any module failed.

The file location of a module comes from `--filename` (single input only) or
from the tree's `loc.filename`.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from boundaryc.config import PassConfig, RewritePolicy, load_pass_config, parse_rewrite_policy
from boundaryc.core.diagnostics import Diagnostic
from boundaryc.core.errors import BoundaryError, EstreeFormatError, UnsupportedNodeError
from boundaryc.core.span import Span
from boundaryc.estree.codec import dump_program, load_program
from boundaryc.estree.printer import print_program
from boundaryc.transform import ModuleUnit, PassResult, transform_module

logger = logging.getLogger(__name__)


@dataclass
class ModuleOutcome:
	source: Path
	result: Optional[PassResult] = None
	output: Optional[str] = None
	diagnostics: List[Diagnostic] = field(default_factory=list)

	@property
	def failed(self) -> bool:
		return any(d.severity == "error" for d in self.diagnostics)

	def to_dict(self, *, include_output: bool) -> dict[str, Any]:
		out: dict[str, Any] = {
			"source": str(self.source),
			"file": self.result.unit.filename if self.result is not None else None,
			"boundary": self.result.kind.value if self.result is not None else None,
			"rewritten": bool(self.result is not None and self.result.rewritten),
			"manifest": (
				self.result.manifest.to_dict()
				if self.result is not None and self.result.manifest is not None
				else None
			),
		}
		if include_output:
			out["output"] = self.output
		return out


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="boundaryc", description="Client/server boundary reference pass over ESTree JSON")
	p.add_argument("source", type=Path, nargs="+", help="Path(s) to ESTree JSON documents")
	p.add_argument("--config", type=Path, default=None, help="Pass configuration JSON file")
	p.add_argument("--server", action="store_true", help="Compile for the server build (enables rewriting under server-only policy)")
	p.add_argument(
		"--rewrite-policy",
		choices=[policy.value for policy in RewritePolicy],
		default=None,
		help="When boundary modules are rewritten (default: server-only)",
	)
	p.add_argument("--adapter-module", default=None, help="Runtime module providing the proxy/registration functions")
	p.add_argument(
		"--preserve-server-body",
		action="store_true",
		help="Keep server module statements and append the registration code",
	)
	p.add_argument("--filename", default=None, help="Module file location (only with a single source)")
	p.add_argument("--emit", choices=["js", "estree"], default="js", help="Output form (default: js)")
	p.add_argument("-o", "--out-dir", type=Path, default=None, help="Write one output file per source into this directory")
	p.add_argument("--json", action="store_true", help="Emit a machine-readable summary on stdout")
	p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	return p


def _resolve_config(args: argparse.Namespace) -> PassConfig:
	config = load_pass_config(args.config) if args.config is not None else PassConfig()
	return config.with_overrides(
		adapter_module=args.adapter_module,
		rewrite_policy=parse_rewrite_policy(args.rewrite_policy) if args.rewrite_policy else None,
		is_server_build=True if args.server else None,
		preserve_server_body=True if args.preserve_server_body else None,
	)


def _dump_json(doc: Any) -> str:
	try:
		return json.dumps(doc, indent=2, ensure_ascii=False) + "\n"
	except RecursionError:
		# The indenting encoder is pure Python; the compact one is not.
		return json.dumps(doc, ensure_ascii=False) + "\n"


def _render(outcome: ModuleOutcome, data: Any, emit: str) -> None:
	"""Fill `outcome.output`; printer gaps on untouched modules are warnings."""
	result = outcome.result
	assert result is not None
	program = result.unit.program
	if emit == "estree":
		doc = data
		if result.rewritten:
			doc = dump_program(program)
			if isinstance(data, dict) and data.get("type") == "File":
				doc = {**data, "program": doc}
		try:
			outcome.output = _dump_json(doc)
		except RecursionError:
			outcome.diagnostics.append(
				Diagnostic(
					message="tree is nested too deeply to serialize",
					code="bad-input",
					phase="estree",
					span=Span(file=result.unit.filename or str(outcome.source)),
				)
			)
		return
	try:
		outcome.output = print_program(program)
	except (UnsupportedNodeError, RecursionError) as err:
		severity = "error" if result.rewritten else "warning"
		message = str(err) if isinstance(err, UnsupportedNodeError) else "tree is nested too deeply to print"
		outcome.diagnostics.append(
			Diagnostic(
				message=message,
				code="unsupported-node",
				phase="printer",
				severity=severity,
				span=Span(file=result.unit.filename),
				notes=["use --emit estree to get the tree instead"],
			)
		)


def process_source(source: Path, config: PassConfig, *, filename: str | None, emit: str) -> ModuleOutcome:
	outcome = ModuleOutcome(source=source)
	try:
		data = json.loads(source.read_text(encoding="utf-8"))
		program = load_program(data)
	except (OSError, json.JSONDecodeError, EstreeFormatError) as err:
		outcome.diagnostics.append(Diagnostic(message=str(err), code="bad-input", phase="estree", span=Span(file=str(source))))
		return outcome
	except RecursionError:
		msg = "document is nested too deeply"
		outcome.diagnostics.append(Diagnostic(message=msg, code="bad-input", phase="estree", span=Span(file=str(source))))
		return outcome
	module_file = filename or (program.loc.file if program.loc is not None else None)
	unit = ModuleUnit(program=program, filename=module_file)
	try:
		outcome.result = transform_module(unit, config)
	except BoundaryError as err:
		diag = err.to_diagnostic()
		if diag.span.file is None:
			diag.span = diag.span.with_file(str(source))
		outcome.diagnostics.append(diag)
		return outcome
	_render(outcome, data, emit)
	return outcome


def _output_path(out_dir: Path, source: Path, emit: str) -> Path:
	base = source.name[: -len(".json")] if source.name.endswith(".json") else source.name
	if emit == "estree":
		return out_dir / f"{base}.json"
	if not Path(base).suffix:
		base += ".js"
	return out_dir / base


def main(argv: list[str] | None = None) -> int:
	"""
	With --json, prints `{exit_code, modules, diagnostics}`; otherwise prints
	outputs to stdout (or --out-dir) and human-readable diagnostics to stderr.
	"""
	parser = _build_parser()
	args = parser.parse_args(argv)
	if args.filename is not None and len(args.source) != 1:
		parser.error("--filename requires exactly one source")

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)

	try:
		config = _resolve_config(args)
	except (OSError, ValueError) as err:
		msg = f"invalid config: {err}"
		if args.json:
			diag = Diagnostic(message=msg, code="bad-config", phase="config", span=Span(file=str(args.config)))
			print(json.dumps({"exit_code": 1, "modules": [], "diagnostics": [diag.to_dict()]}))
		else:
			print(f"{args.config}:?:?: error: {msg}", file=sys.stderr)
		return 1
	logger.debug("pass config %s", config.to_dict())

	outcomes = [process_source(src, config, filename=args.filename, emit=args.emit) for src in args.source]

	if args.out_dir is not None:
		args.out_dir.mkdir(parents=True, exist_ok=True)
		for outcome in outcomes:
			if outcome.output is not None:
				_output_path(args.out_dir, outcome.source, args.emit).write_text(outcome.output, encoding="utf-8")

	exit_code = 1 if any(o.failed for o in outcomes) else 0
	if args.json:
		payload = {
			"exit_code": exit_code,
			"modules": [o.to_dict(include_output=args.out_dir is None) for o in outcomes],
			"diagnostics": [d.to_dict(str(o.source)) for o in outcomes for d in o.diagnostics],
		}
		print(json.dumps(payload))
		return exit_code

	for outcome in outcomes:
		for d in outcome.diagnostics:
			print(d.format_human(str(outcome.source)), file=sys.stderr)
		if args.out_dir is None and outcome.output is not None:
			if len(outcomes) > 1:
				print(f"// {outcome.source}")
			sys.stdout.write(outcome.output)
	return exit_code


__all__ = ["main", "process_source", "ModuleOutcome"]
