# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Helpers for tests: small Babel-shaped ESTree JSON builders.

Tests describe modules the way `@babel/parser` would hand them over and go
through the real codec, so decode paths are exercised alongside the pass.
"""

from __future__ import annotations

from typing import Any, Iterable

from boundaryc.estree.codec import load_program
from boundaryc.estree.nodes import Program
from boundaryc.transform import ModuleUnit


def loc(line: int, column: int = 0, *, filename: str | None = None) -> dict[str, Any]:
	out: dict[str, Any] = {"start": {"line": line, "column": column}, "end": {"line": line, "column": column + 1}}
	if filename:
		out["filename"] = filename
	return out


def ident(name: str) -> dict[str, Any]:
	return {"type": "Identifier", "name": name}


def string(value: str) -> dict[str, Any]:
	return {"type": "StringLiteral", "value": value}


def directive(value: str, line: int = 1) -> dict[str, Any]:
	return {"type": "Directive", "value": {"type": "DirectiveLiteral", "value": value}, "loc": loc(line)}


def fn_decl(name: str | None, *, is_async: bool = False) -> dict[str, Any]:
	return {
		"type": "FunctionDeclaration",
		"id": ident(name) if name is not None else None,
		"params": [],
		"body": {"type": "BlockStatement", "body": [], "directives": []},
		"generator": False,
		"async": is_async,
	}


def class_decl(name: str | None) -> dict[str, Any]:
	return {"type": "ClassDeclaration", "id": ident(name) if name else None, "superClass": None, "body": {"type": "ClassBody", "body": []}}


def const_decl(*targets: Any) -> dict[str, Any]:
	"""`const a = 1, ...`; a target is a name or a prebuilt pattern object."""
	declarations = []
	for target in targets:
		pattern = ident(target) if isinstance(target, str) else target
		declarations.append(
			{"type": "VariableDeclarator", "id": pattern, "init": {"type": "NumericLiteral", "value": 1}}
		)
	return {"type": "VariableDeclaration", "kind": "const", "declarations": declarations}


def export_named(declaration: dict[str, Any]) -> dict[str, Any]:
	return {"type": "ExportNamedDeclaration", "declaration": declaration, "specifiers": [], "source": None}


def export_specifiers(pairs: Iterable[tuple[str, Any]], source: str | None = None) -> dict[str, Any]:
	specs = []
	for local, exported in pairs:
		exported_node = exported if isinstance(exported, dict) else ident(exported)
		specs.append({"type": "ExportSpecifier", "local": ident(local), "exported": exported_node})
	return {
		"type": "ExportNamedDeclaration",
		"declaration": None,
		"specifiers": specs,
		"source": string(source) if source is not None else None,
	}


def export_default(declaration: dict[str, Any]) -> dict[str, Any]:
	return {"type": "ExportDefaultDeclaration", "declaration": declaration}


def program_json(*body: dict[str, Any], directives: Iterable[str] = (), filename: str | None = None) -> dict[str, Any]:
	return {
		"type": "File",
		"program": {
			"type": "Program",
			"sourceType": "module",
			"directives": [directive(d, line=i + 1) for i, d in enumerate(directives)],
			"body": list(body),
			"loc": loc(1, filename=filename),
		},
	}


def make_program(*body: dict[str, Any], directives: Iterable[str] = ()) -> Program:
	return load_program(program_json(*body, directives=directives))


def make_unit(*body: dict[str, Any], directives: Iterable[str] = (), filename: str | None = "/app/src/mod.js") -> ModuleUnit:
	return ModuleUnit(program=make_program(*body, directives=directives), filename=filename)
