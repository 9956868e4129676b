# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
ESTree node subset (Babel flavour).

Only the node kinds the boundary pass inspects or synthesizes are modeled as
dataclasses. Everything else is carried as `Opaque`, which keeps the original
JSON object untouched so a module the pass leaves alone round-trips exactly.

Field names are snake_case; `JSON_FIELDS` on a class maps them to the ESTree
property name when the two differ.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional

from boundaryc.core.span import Span


class Node:
	type: ClassVar[str] = ""
	JSON_FIELDS: ClassVar[Dict[str, str]] = {}
	loc: Optional[Span]


class Expr(Node):
	pass


class Stmt(Node):
	pass


class Pattern(Node):
	pass


@dataclass
class Opaque(Expr, Stmt, Pattern):
	"""A node kind outside the modeled subset; `raw` is the ESTree JSON object."""

	node_type: str
	raw: Dict[str, Any]
	loc: Optional[Span] = None

	@property
	def type(self) -> str:  # type: ignore[override]
		return self.node_type


# Literals / names ---------------------------------------------------------


@dataclass
class Identifier(Expr, Pattern):
	type: ClassVar[str] = "Identifier"
	name: str
	loc: Optional[Span] = None


@dataclass
class StringLiteral(Expr):
	type: ClassVar[str] = "StringLiteral"
	value: str
	loc: Optional[Span] = None


@dataclass
class NullLiteral(Expr):
	type: ClassVar[str] = "NullLiteral"
	loc: Optional[Span] = None


@dataclass
class DirectiveLiteral(Node):
	type: ClassVar[str] = "DirectiveLiteral"
	value: str
	loc: Optional[Span] = None


@dataclass
class Directive(Node):
	type: ClassVar[str] = "Directive"
	value: DirectiveLiteral
	loc: Optional[Span] = None


# Expressions --------------------------------------------------------------


@dataclass
class MemberExpression(Expr):
	type: ClassVar[str] = "MemberExpression"
	object: Expr
	property: Expr
	computed: bool = False
	loc: Optional[Span] = None


@dataclass
class CallExpression(Expr):
	type: ClassVar[str] = "CallExpression"
	JSON_FIELDS: ClassVar[Dict[str, str]] = {"args": "arguments"}
	callee: Expr
	args: List[Expr] = field(default_factory=list)
	loc: Optional[Span] = None


@dataclass
class AssignmentExpression(Expr):
	type: ClassVar[str] = "AssignmentExpression"
	operator: str
	left: Node
	right: Expr
	loc: Optional[Span] = None


@dataclass
class UnaryExpression(Expr):
	type: ClassVar[str] = "UnaryExpression"
	operator: str
	argument: Expr
	prefix: bool = True
	loc: Optional[Span] = None


@dataclass
class BinaryExpression(Expr):
	type: ClassVar[str] = "BinaryExpression"
	operator: str
	left: Expr
	right: Expr
	loc: Optional[Span] = None


@dataclass
class ArrowFunctionExpression(Expr):
	type: ClassVar[str] = "ArrowFunctionExpression"
	JSON_FIELDS: ClassVar[Dict[str, str]] = {"is_async": "async"}
	params: List[Pattern]
	body: Node
	is_async: bool = False
	expression: bool = False
	loc: Optional[Span] = None


# Patterns -----------------------------------------------------------------


@dataclass
class ObjectProperty(Node):
	type: ClassVar[str] = "ObjectProperty"
	key: Expr
	value: Node
	computed: bool = False
	shorthand: bool = False
	loc: Optional[Span] = None


@dataclass
class ObjectPattern(Pattern):
	type: ClassVar[str] = "ObjectPattern"
	properties: List[Node]
	loc: Optional[Span] = None


@dataclass
class ArrayPattern(Pattern):
	type: ClassVar[str] = "ArrayPattern"
	# Holes (`[, b] = xs`) are None.
	elements: List[Optional[Pattern]]
	loc: Optional[Span] = None


@dataclass
class RestElement(Pattern):
	type: ClassVar[str] = "RestElement"
	argument: Pattern
	loc: Optional[Span] = None


@dataclass
class AssignmentPattern(Pattern):
	type: ClassVar[str] = "AssignmentPattern"
	left: Pattern
	right: Expr
	loc: Optional[Span] = None


# Statements / declarations ------------------------------------------------


@dataclass
class BlockStatement(Stmt):
	type: ClassVar[str] = "BlockStatement"
	body: List[Stmt]
	directives: List[Directive] = field(default_factory=list)
	loc: Optional[Span] = None


@dataclass
class ExpressionStatement(Stmt):
	type: ClassVar[str] = "ExpressionStatement"
	expression: Expr
	loc: Optional[Span] = None


@dataclass
class IfStatement(Stmt):
	type: ClassVar[str] = "IfStatement"
	test: Expr
	consequent: Stmt
	alternate: Optional[Stmt] = None
	loc: Optional[Span] = None


@dataclass
class ForInStatement(Stmt):
	type: ClassVar[str] = "ForInStatement"
	left: Node
	right: Expr
	body: Stmt
	loc: Optional[Span] = None


@dataclass
class VariableDeclarator(Node):
	type: ClassVar[str] = "VariableDeclarator"
	id: Pattern
	init: Optional[Expr] = None
	loc: Optional[Span] = None


@dataclass
class VariableDeclaration(Stmt):
	type: ClassVar[str] = "VariableDeclaration"
	kind: str  # "var" | "let" | "const"
	declarations: List[VariableDeclarator]
	loc: Optional[Span] = None


@dataclass
class FunctionDeclaration(Stmt):
	type: ClassVar[str] = "FunctionDeclaration"
	JSON_FIELDS: ClassVar[Dict[str, str]] = {"is_async": "async"}
	# None only for `export default function () {}`.
	id: Optional[Identifier]
	params: List[Pattern]
	body: BlockStatement
	generator: bool = False
	is_async: bool = False
	loc: Optional[Span] = None


@dataclass
class ClassBody(Node):
	type: ClassVar[str] = "ClassBody"
	# Members (methods, properties, static blocks) stay Opaque.
	body: List[Node]
	loc: Optional[Span] = None


@dataclass
class ClassDeclaration(Stmt):
	type: ClassVar[str] = "ClassDeclaration"
	JSON_FIELDS: ClassVar[Dict[str, str]] = {"super_class": "superClass"}
	id: Optional[Identifier]
	body: ClassBody
	super_class: Optional[Expr] = None
	loc: Optional[Span] = None


@dataclass
class ExportSpecifier(Node):
	type: ClassVar[str] = "ExportSpecifier"
	local: Expr
	# Identifier, or StringLiteral for `export { x as "y-z" }`.
	exported: Expr
	loc: Optional[Span] = None


@dataclass
class ExportNamespaceSpecifier(Node):
	type: ClassVar[str] = "ExportNamespaceSpecifier"
	exported: Expr
	loc: Optional[Span] = None


@dataclass
class ExportDefaultSpecifier(Node):
	type: ClassVar[str] = "ExportDefaultSpecifier"
	exported: Identifier
	loc: Optional[Span] = None


@dataclass
class ExportNamedDeclaration(Stmt):
	type: ClassVar[str] = "ExportNamedDeclaration"
	declaration: Optional[Stmt] = None
	specifiers: List[Node] = field(default_factory=list)
	source: Optional[Expr] = None
	loc: Optional[Span] = None


@dataclass
class ExportDefaultDeclaration(Stmt):
	type: ClassVar[str] = "ExportDefaultDeclaration"
	declaration: Optional[Node] = None
	loc: Optional[Span] = None


@dataclass
class ExportAllDeclaration(Stmt):
	type: ClassVar[str] = "ExportAllDeclaration"
	source: Expr
	exported: Optional[Expr] = None
	loc: Optional[Span] = None


@dataclass
class Program(Node):
	type: ClassVar[str] = "Program"
	JSON_FIELDS: ClassVar[Dict[str, str]] = {"source_type": "sourceType"}
	body: List[Stmt]
	directives: List[Directive] = field(default_factory=list)
	source_type: str = "module"
	loc: Optional[Span] = None


NODE_TYPES: Dict[str, type] = {
	cls.type: cls
	for cls in (
		Identifier,
		StringLiteral,
		NullLiteral,
		DirectiveLiteral,
		Directive,
		MemberExpression,
		CallExpression,
		AssignmentExpression,
		UnaryExpression,
		BinaryExpression,
		ArrowFunctionExpression,
		ObjectProperty,
		ObjectPattern,
		ArrayPattern,
		RestElement,
		AssignmentPattern,
		BlockStatement,
		ExpressionStatement,
		IfStatement,
		ForInStatement,
		VariableDeclarator,
		VariableDeclaration,
		FunctionDeclaration,
		ClassBody,
		ClassDeclaration,
		ExportSpecifier,
		ExportNamespaceSpecifier,
		ExportDefaultSpecifier,
		ExportNamedDeclaration,
		ExportDefaultDeclaration,
		ExportAllDeclaration,
		Program,
	)
}


def exported_name(node: Node) -> str | None:
	"""Name of an export-facing identifier or string literal, else None."""
	if isinstance(node, Identifier):
		return node.name
	if isinstance(node, StringLiteral):
		return node.value
	return None


def binding_names(pattern: Node | None) -> List[str]:
	"""
	Names bound by a declaration target, in source order.

	`a` -> [a]; `{ a, b: [c, ...d], e = 1 }` -> [a, c, d, e]. Opaque or unknown
	patterns bind nothing we can see.
	"""
	if pattern is None:
		return []
	if isinstance(pattern, Identifier):
		return [pattern.name]
	if isinstance(pattern, ObjectPattern):
		out: List[str] = []
		for prop in pattern.properties:
			if isinstance(prop, ObjectProperty):
				out.extend(binding_names(prop.value))
			elif isinstance(prop, RestElement):
				out.extend(binding_names(prop.argument))
		return out
	if isinstance(pattern, ArrayPattern):
		out = []
		for elem in pattern.elements:
			out.extend(binding_names(elem))
		return out
	if isinstance(pattern, RestElement):
		return binding_names(pattern.argument)
	if isinstance(pattern, AssignmentPattern):
		return binding_names(pattern.left)
	return []
