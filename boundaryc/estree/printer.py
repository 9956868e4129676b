# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
JavaScript source printer for the modeled ESTree subset.

Output is deterministic: two-space indentation, double-quoted strings, one
statement per line. Only the parentheses required by the node shapes the pass
builds are emitted (arrow callees, nested binary/assignment operands).
"""

from __future__ import annotations

import json
from typing import List

from boundaryc.core.errors import UnsupportedNodeError
from boundaryc.estree import nodes as N

INDENT = "  "

_WORD_UNARY = {"typeof", "void", "delete"}


def _string(value: str) -> str:
	return json.dumps(value, ensure_ascii=False)


def _needs_parens_as_operand(expr: N.Node) -> bool:
	return isinstance(expr, (N.BinaryExpression, N.AssignmentExpression, N.ArrowFunctionExpression))


def _needs_parens_as_callee(expr: N.Node) -> bool:
	return isinstance(
		expr,
		(N.ArrowFunctionExpression, N.AssignmentExpression, N.BinaryExpression, N.UnaryExpression),
	)


def format_pattern(node: N.Node | None, indent: int = 0) -> str:
	if node is None:
		return ""
	if isinstance(node, N.Identifier):
		return node.name
	if isinstance(node, N.ObjectPattern):
		if not node.properties:
			return "{}"
		return "{ " + ", ".join(format_pattern(p, indent) for p in node.properties) + " }"
	if isinstance(node, N.ObjectProperty):
		if node.shorthand:
			return format_pattern(node.value, indent)
		key = f"[{format_expr(node.key, indent)}]" if node.computed else format_expr(node.key, indent)
		return f"{key}: {format_pattern(node.value, indent)}"
	if isinstance(node, N.ArrayPattern):
		return "[" + ", ".join(format_pattern(e, indent) for e in node.elements) + "]"
	if isinstance(node, N.RestElement):
		return f"...{format_pattern(node.argument, indent)}"
	if isinstance(node, N.AssignmentPattern):
		return f"{format_pattern(node.left, indent)} = {format_expr(node.right, indent)}"
	return format_expr(node, indent)


def format_expr(expr: N.Node, indent: int = 0) -> str:
	"""Render an expression; `indent` is the level of the line it starts on."""
	if isinstance(expr, N.Identifier):
		return expr.name
	if isinstance(expr, N.StringLiteral):
		return _string(expr.value)
	if isinstance(expr, N.NullLiteral):
		return "null"
	if isinstance(expr, N.MemberExpression):
		obj = format_expr(expr.object, indent)
		if _needs_parens_as_callee(expr.object):
			obj = f"({obj})"
		if expr.computed:
			return f"{obj}[{format_expr(expr.property, indent)}]"
		return f"{obj}.{format_expr(expr.property, indent)}"
	if isinstance(expr, N.CallExpression):
		callee = format_expr(expr.callee, indent)
		if _needs_parens_as_callee(expr.callee):
			callee = f"({callee})"
		args = ", ".join(format_expr(a, indent) for a in expr.args)
		return f"{callee}({args})"
	if isinstance(expr, N.AssignmentExpression):
		return f"{format_pattern(expr.left, indent)} {expr.operator} {format_expr(expr.right, indent)}"
	if isinstance(expr, N.UnaryExpression):
		arg = format_expr(expr.argument, indent)
		if _needs_parens_as_operand(expr.argument):
			arg = f"({arg})"
		sep = " " if expr.operator in _WORD_UNARY else ""
		return f"{expr.operator}{sep}{arg}"
	if isinstance(expr, N.BinaryExpression):
		left = format_expr(expr.left, indent)
		right = format_expr(expr.right, indent)
		if _needs_parens_as_operand(expr.left):
			left = f"({left})"
		if _needs_parens_as_operand(expr.right):
			right = f"({right})"
		return f"{left} {expr.operator} {right}"
	if isinstance(expr, N.ArrowFunctionExpression):
		params = ", ".join(format_pattern(p, indent) for p in expr.params)
		prefix = "async " if expr.is_async else ""
		if isinstance(expr.body, N.BlockStatement):
			lines = format_stmt(expr.body, indent)
			lines[0] = lines[0].lstrip()
			body = "\n".join(lines)
		else:
			body = format_expr(expr.body, indent)
		return f"{prefix}({params}) => {body}"
	raise UnsupportedNodeError(expr.type)


def _block_lines(block: N.BlockStatement, indent: int) -> List[str]:
	pad = INDENT * indent
	if not block.body and not block.directives:
		return [pad + "{}"]
	lines = [pad + "{"]
	for d in block.directives:
		lines.append(INDENT * (indent + 1) + f"{_string(d.value.value)};")
	for stmt in block.body:
		lines.extend(format_stmt(stmt, indent + 1))
	lines.append(pad + "}")
	return lines


def _attach(head: str, body: N.Node, indent: int) -> List[str]:
	"""`head {` ... `}` for blocks, `head stmt` for single statements."""
	if isinstance(body, N.BlockStatement):
		body_lines = _block_lines(body, indent)
		body_lines[0] = f"{head} {body_lines[0].lstrip()}"
		return body_lines
	inner = format_stmt(body, indent)
	inner[0] = f"{head} {inner[0].lstrip()}"
	return inner


def _class_lines(head: str, body: N.ClassBody) -> List[str]:
	"""Class members are not modeled; only an empty body can be printed."""
	if body.body:
		raise UnsupportedNodeError(body.body[0].type)
	return [f"{head} {{}}"]


def _declaration(kind: str, decls: List[N.VariableDeclarator], indent: int) -> str:
	parts = []
	for d in decls:
		text = format_pattern(d.id, indent)
		if d.init is not None:
			text += f" = {format_expr(d.init, indent)}"
		parts.append(text)
	return f"{kind} " + ", ".join(parts)


def _specifier(spec: N.Node) -> str:
	if isinstance(spec, N.ExportSpecifier):
		local = format_expr(spec.local)
		exported = format_expr(spec.exported)
		return local if local == exported else f"{local} as {exported}"
	if isinstance(spec, N.ExportNamespaceSpecifier):
		return f"* as {format_expr(spec.exported)}"
	if isinstance(spec, N.ExportDefaultSpecifier):
		return format_expr(spec.exported)
	raise UnsupportedNodeError(spec.type)


def format_stmt(stmt: N.Node, indent: int = 0) -> List[str]:
	"""Render one statement as a list of already-indented lines."""
	pad = INDENT * indent
	if isinstance(stmt, N.ExpressionStatement):
		return [pad + format_expr(stmt.expression, indent) + ";"]
	if isinstance(stmt, N.VariableDeclaration):
		return [pad + _declaration(stmt.kind, stmt.declarations, indent) + ";"]
	if isinstance(stmt, N.BlockStatement):
		return _block_lines(stmt, indent)
	if isinstance(stmt, N.IfStatement):
		lines = _attach(f"{pad}if ({format_expr(stmt.test, indent)})", stmt.consequent, indent)
		if stmt.alternate is not None:
			if isinstance(stmt.consequent, N.BlockStatement):
				alt = _attach("else", stmt.alternate, indent)
				lines[-1] = f"{lines[-1]} {alt[0].lstrip()}"
				lines.extend(alt[1:])
			else:
				lines.extend(_attach(f"{pad}else", stmt.alternate, indent))
		return lines
	if isinstance(stmt, N.ForInStatement):
		if isinstance(stmt.left, N.VariableDeclaration):
			left = _declaration(stmt.left.kind, stmt.left.declarations, indent)
		else:
			left = format_pattern(stmt.left, indent)
		return _attach(f"{pad}for ({left} in {format_expr(stmt.right, indent)})", stmt.body, indent)
	if isinstance(stmt, N.FunctionDeclaration):
		name = stmt.id.name if stmt.id is not None else ""
		star = "*" if stmt.generator else ""
		prefix = "async " if stmt.is_async else ""
		params = ", ".join(format_pattern(p, indent) for p in stmt.params)
		name_part = f" {name}" if name else ""
		return _attach(f"{pad}{prefix}function{star}{name_part}({params})", stmt.body, indent)
	if isinstance(stmt, N.ClassDeclaration):
		name_part = f" {stmt.id.name}" if stmt.id is not None else ""
		extends = f" extends {format_expr(stmt.super_class, indent)}" if stmt.super_class is not None else ""
		return _class_lines(f"{pad}class{name_part}{extends}", stmt.body)
	if isinstance(stmt, N.ExportNamedDeclaration):
		if stmt.declaration is not None:
			inner = format_stmt(stmt.declaration, indent)
			inner[0] = f"{pad}export {inner[0].lstrip()}"
			return inner
		specs = ", ".join(_specifier(s) for s in stmt.specifiers)
		text = "export {}" if not specs else f"export {{ {specs} }}"
		if len(stmt.specifiers) == 1 and isinstance(stmt.specifiers[0], N.ExportNamespaceSpecifier):
			text = f"export {specs}"
		if stmt.source is not None:
			text += f" from {format_expr(stmt.source, indent)}"
		return [pad + text + ";"]
	if isinstance(stmt, N.ExportDefaultDeclaration):
		decl = stmt.declaration
		if isinstance(decl, (N.FunctionDeclaration, N.ClassDeclaration)):
			inner = format_stmt(decl, indent)
			inner[0] = f"{pad}export default {inner[0].lstrip()}"
			return inner
		return [f"{pad}export default {format_expr(decl, indent)};"]
	if isinstance(stmt, N.ExportAllDeclaration):
		star = "*" if stmt.exported is None else f"* as {format_expr(stmt.exported, indent)}"
		return [f"{pad}export {star} from {format_expr(stmt.source, indent)};"]
	raise UnsupportedNodeError(stmt.type)


def print_program(program: N.Program) -> str:
	"""Render a whole module; the result ends with a newline unless it is empty."""
	lines: List[str] = [f"{_string(d.value.value)};" for d in program.directives]
	for stmt in program.body:
		lines.extend(format_stmt(stmt, 0))
	return "\n".join(lines) + ("\n" if lines else "")


__all__ = ["format_expr", "format_pattern", "format_stmt", "print_program"]
