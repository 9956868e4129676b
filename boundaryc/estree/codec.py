# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
ESTree JSON <-> node model.

Accepts the Babel flavour (`File` wrapper, `Directive`/`DirectiveLiteral`,
`StringLiteral`, `ObjectProperty`) and the plain ESTree flavour produced by
acorn (`Literal`, `Property`, directives as leading `ExpressionStatement`s
with a `directive` field). Output is always Babel-shaped.

Unmodeled node kinds decode to `Opaque` with their JSON object kept as-is.
"""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path
from typing import Any, List

from boundaryc.core.errors import EstreeFormatError
from boundaryc.core.span import Span
from boundaryc.estree import nodes as N

# Decoded nodes remember their source object here so unmodeled properties
# (start/end, comments, typeParameters, ...) survive re-encoding.
_RAW_ATTR = "_estree_raw"

# Subtrees nested deeper than this are kept as Opaque instead of being decoded.
MAX_DECODE_DEPTH = 128


def _decode_value(value: Any, *, path: str, depth: int = 0) -> Any:
	if isinstance(value, dict):
		if "type" not in value:
			raise EstreeFormatError(f"{path}: expected an ESTree node (object with 'type')")
		return decode_node(value, path=path, depth=depth)
	if isinstance(value, list):
		return [None if item is None else _decode_value(item, path=f"{path}[{i}]", depth=depth) for i, item in enumerate(value)]
	return value


def _decode_literal(obj: dict[str, Any]) -> N.Node:
	value = obj.get("value")
	loc = Span.from_estree_loc(obj.get("loc"))
	if isinstance(value, str):
		return N.StringLiteral(value=value, loc=loc)
	if value is None and obj.get("raw") == "null":
		return N.NullLiteral(loc=loc)
	return N.Opaque(node_type="Literal", raw=obj, loc=loc)


def decode_node(obj: dict[str, Any], *, path: str = "$", depth: int = 0) -> N.Node:
	"""Decode one ESTree JSON object into a node (Opaque for unmodeled kinds)."""
	node_type = obj.get("type")
	if not isinstance(node_type, str) or not node_type:
		raise EstreeFormatError(f"{path}: node 'type' must be a non-empty string")
	loc = Span.from_estree_loc(obj.get("loc"))
	if node_type == "Literal":
		return _decode_literal(obj)
	if node_type == "Property":
		node_type = "ObjectProperty"
	cls = N.NODE_TYPES.get(node_type)
	if cls is None or depth >= MAX_DECODE_DEPTH:
		return N.Opaque(node_type=node_type, raw=obj, loc=loc)
	aliases = cls.JSON_FIELDS
	kwargs: dict[str, Any] = {}
	for f in fields(cls):
		if f.name == "loc":
			continue
		key = aliases.get(f.name, f.name)
		if key not in obj:
			continue
		kwargs[f.name] = _decode_value(obj[key], path=f"{path}.{key}", depth=depth + 1)
	try:
		node = cls(loc=loc, **kwargs)
	except TypeError as err:
		raise EstreeFormatError(f"{path}: malformed {node_type} node ({err})") from err
	setattr(node, _RAW_ATTR, obj)
	return node


def _lift_estree_directives(body: List[Any]) -> tuple[list[N.Directive], list[Any]]:
	"""Split acorn-style directive prologue statements off the front of a body."""
	directives: list[N.Directive] = []
	idx = 0
	while idx < len(body):
		stmt = body[idx]
		if not (isinstance(stmt, dict) and stmt.get("type") == "ExpressionStatement" and isinstance(stmt.get("directive"), str)):
			break
		loc = Span.from_estree_loc(stmt.get("loc"))
		directives.append(N.Directive(value=N.DirectiveLiteral(value=stmt["directive"], loc=loc), loc=loc))
		idx += 1
	return directives, body[idx:]


def load_program(obj: Any) -> N.Program:
	"""
	Decode a Babel `File` or a `Program` JSON object into a `Program`.

	Raises `EstreeFormatError` when the document is not a module tree.
	"""
	if not isinstance(obj, dict):
		raise EstreeFormatError("$: ESTree document must be a JSON object")
	if obj.get("type") == "File":
		obj = obj.get("program")
		if not isinstance(obj, dict):
			raise EstreeFormatError("$.program: File node has no program")
	if obj.get("type") != "Program":
		raise EstreeFormatError(f"$: expected a Program node, got {obj.get('type')!r}")
	raw_body = obj.get("body")
	if not isinstance(raw_body, list):
		raise EstreeFormatError("$.body: Program body must be a list")
	lifted, raw_body = _lift_estree_directives(raw_body)
	raw_directives = obj.get("directives") or []
	if not isinstance(raw_directives, list):
		raise EstreeFormatError("$.directives: Program directives must be a list")
	directives = [_decode_value(d, path=f"$.directives[{i}]") for i, d in enumerate(raw_directives)]
	for i, d in enumerate(directives):
		if not isinstance(d, N.Directive):
			raise EstreeFormatError(f"$.directives[{i}]: expected a Directive node")
	body = [_decode_value(stmt, path=f"$.body[{i}]") for i, stmt in enumerate(raw_body)]
	source_type = obj.get("sourceType", "module")
	program = N.Program(
		body=body,
		directives=directives + lifted,
		source_type=source_type if isinstance(source_type, str) else "module",
		loc=Span.from_estree_loc(obj.get("loc")),
	)
	setattr(program, _RAW_ATTR, obj)
	return program


def load_program_file(path: Path) -> N.Program:
	try:
		data = json.loads(path.read_text(encoding="utf-8"))
	except json.JSONDecodeError as err:
		raise EstreeFormatError(f"{path}: not valid JSON ({err.msg} at line {err.lineno})") from err
	return load_program(data)


def _encode_value(value: Any) -> Any:
	if isinstance(value, N.Node):
		return encode_node(value)
	if isinstance(value, list):
		return [_encode_value(item) for item in value]
	return value


def encode_node(node: N.Node) -> dict[str, Any]:
	"""Encode a node back to a Babel-shaped ESTree JSON object."""
	if isinstance(node, N.Opaque):
		return node.raw
	raw = getattr(node, _RAW_ATTR, None)
	out: dict[str, Any] = dict(raw) if isinstance(raw, dict) else {}
	out["type"] = node.type
	aliases = type(node).JSON_FIELDS
	for f in fields(node):  # type: ignore[arg-type]
		if f.name == "loc":
			continue
		out[aliases.get(f.name, f.name)] = _encode_value(getattr(node, f.name))
	if node.loc is not None and "loc" not in out:
		out["loc"] = node.loc.to_estree_loc()
	return out


def dump_program(program: N.Program) -> dict[str, Any]:
	return encode_node(program)


__all__ = [
	"decode_node",
	"encode_node",
	"load_program",
	"load_program_file",
	"dump_program",
	"MAX_DECODE_DEPTH",
]
