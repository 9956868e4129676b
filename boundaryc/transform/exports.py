# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Static export surface of a module.

Walks top-level export statements only:

    export const a = 1, { b, c: [d] } = obj;   -> a, b, d
    export function f() {} / export class C {}  -> f / C
    export { x, y as z, w as "w-w" };           -> x, z, w-w
    export * as ns from "m";                    -> ns
    export default <anything>;                  -> default
    export enum Color {} / export namespace N {}  -> Color / N

Assignment-style exports (`module.exports.x = ...`) and bare
`export * from "m"` are not statically visible and are left out; the server
registration code enumerates the runtime export object to cover them.
"""

from __future__ import annotations

from typing import List

from boundaryc.estree import nodes as N

# TypeScript declarations that only exist at type level.
TYPE_ONLY_DECLARATIONS = {"TSTypeAliasDeclaration", "TSInterfaceDeclaration"}


def _add(out: List[str], seen: set[str], name: str | None) -> None:
	if name is None or name in seen:
		return
	seen.add(name)
	out.append(name)


def _opaque_declaration_name(decl: N.Opaque) -> str | None:
	"""
	Name declared by an unmodeled declaration (`export enum E {}`,
	`export namespace N {}`, `export declare function f()`).

	Type-only declarations have no runtime binding and are skipped.
	"""
	if decl.node_type in TYPE_ONLY_DECLARATIONS:
		return None
	ident = decl.raw.get("id")
	if isinstance(ident, dict) and ident.get("type") == "Identifier" and isinstance(ident.get("name"), str):
		return ident["name"]
	return None


def collect_exports(program: N.Program) -> List[str]:
	"""Ordered, duplicate-free export names of `program`."""
	out: List[str] = []
	seen: set[str] = set()
	for stmt in program.body:
		if isinstance(stmt, N.ExportNamedDeclaration):
			decl = stmt.declaration
			if isinstance(decl, N.VariableDeclaration):
				for declarator in decl.declarations:
					for name in N.binding_names(declarator.id):
						_add(out, seen, name)
			elif isinstance(decl, (N.FunctionDeclaration, N.ClassDeclaration)):
				if decl.id is not None:
					_add(out, seen, decl.id.name)
			elif isinstance(decl, N.Opaque):
				_add(out, seen, _opaque_declaration_name(decl))
			elif decl is None:
				for spec in stmt.specifiers:
					if isinstance(spec, (N.ExportSpecifier, N.ExportNamespaceSpecifier, N.ExportDefaultSpecifier)):
						_add(out, seen, N.exported_name(spec.exported))
		elif isinstance(stmt, N.ExportDefaultDeclaration):
			if stmt.declaration is not None:
				_add(out, seen, "default")
		elif isinstance(stmt, N.ExportAllDeclaration):
			if stmt.exported is not None:
				_add(out, seen, N.exported_name(stmt.exported))
	return out
