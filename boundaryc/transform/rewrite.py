# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Body replacement for boundary modules.

Client boundary: the module becomes a single remote-reference proxy.

    module.exports = require(ADAPTER).createClientModuleProxy(ID);

Server boundary: every callable export is registered as a server reference.
The export object is inspected at run time, not from the static export list,
so assignment-style exports are covered too.

    (() => {
      const { registerServerReference } = require(ADAPTER);
      if (typeof module.exports === "function") {
        registerServerReference(module.exports, ID, null);
      } else {
        for (const key in module.exports) {
          if (typeof module.exports[key] === "function") {
            registerServerReference(module.exports[key], ID, key);
          }
        }
      }
    })();

Notes:
  * The directive prologue is always consumed, so a rewritten module is never
    classified again.
  * `null` as the registration name means "the module export itself".
"""

from __future__ import annotations

from typing import List

from boundaryc.config import PassConfig
from boundaryc.estree import nodes as N

from .unit import BoundaryKind, ModuleUnit

REGISTER_SERVER_REFERENCE = "registerServerReference"
CREATE_CLIENT_MODULE_PROXY = "createClientModuleProxy"


class ReferenceRewriter:
	"""
	Build replacement statements for one module reference id.

	Each helper returns freshly built nodes; nothing is shared between the
	statements it emits.
	"""

	def __init__(self, reference_id: str, adapter_module: str) -> None:
		self.reference_id = reference_id
		self.adapter_module = adapter_module

	# Shared pieces -----------------------------------------------------

	def _module_exports(self) -> N.MemberExpression:
		return N.MemberExpression(object=N.Identifier("module"), property=N.Identifier("exports"))

	def _require_adapter(self) -> N.CallExpression:
		return N.CallExpression(callee=N.Identifier("require"), args=[N.StringLiteral(self.adapter_module)])

	def _is_function(self, value: N.Expr) -> N.BinaryExpression:
		return N.BinaryExpression(
			operator="===",
			left=N.UnaryExpression(operator="typeof", argument=value),
			right=N.StringLiteral("function"),
		)

	def _register(self, value: N.Expr, name: N.Expr) -> N.ExpressionStatement:
		return N.ExpressionStatement(
			N.CallExpression(
				callee=N.Identifier(REGISTER_SERVER_REFERENCE),
				args=[value, N.StringLiteral(self.reference_id), name],
			)
		)

	# Client ------------------------------------------------------------

	def client_proxy(self) -> List[N.Stmt]:
		proxy = N.CallExpression(
			callee=N.MemberExpression(
				object=self._require_adapter(),
				property=N.Identifier(CREATE_CLIENT_MODULE_PROXY),
			),
			args=[N.StringLiteral(self.reference_id)],
		)
		return [N.ExpressionStatement(N.AssignmentExpression(operator="=", left=self._module_exports(), right=proxy))]

	# Server ------------------------------------------------------------

	def _export_member(self) -> N.MemberExpression:
		return N.MemberExpression(object=self._module_exports(), property=N.Identifier("key"), computed=True)

	def _register_each_key(self) -> N.ForInStatement:
		"""`for (const key in module.exports)` registering the callable members."""
		check = N.IfStatement(
			test=self._is_function(self._export_member()),
			consequent=N.BlockStatement([self._register(self._export_member(), N.Identifier("key"))]),
		)
		return N.ForInStatement(
			left=N.VariableDeclaration(kind="const", declarations=[N.VariableDeclarator(id=N.Identifier("key"))]),
			right=self._module_exports(),
			body=N.BlockStatement([check]),
		)

	def server_registration(self) -> List[N.Stmt]:
		resolve = N.VariableDeclaration(
			kind="const",
			declarations=[
				N.VariableDeclarator(
					id=N.ObjectPattern(
						[
							N.ObjectProperty(
								key=N.Identifier(REGISTER_SERVER_REFERENCE),
								value=N.Identifier(REGISTER_SERVER_REFERENCE),
								shorthand=True,
							)
						]
					),
					init=self._require_adapter(),
				)
			],
		)
		branch = N.IfStatement(
			test=self._is_function(self._module_exports()),
			consequent=N.BlockStatement([self._register(self._module_exports(), N.NullLiteral())]),
			alternate=N.BlockStatement([self._register_each_key()]),
		)
		wrapper = N.ArrowFunctionExpression(params=[], body=N.BlockStatement([resolve, branch]))
		return [N.ExpressionStatement(N.CallExpression(callee=wrapper, args=[]))]


def rewrite_module(unit: ModuleUnit, kind: BoundaryKind, reference_id: str, config: PassConfig) -> None:
	"""
	Replace the unit's statements and directives for a resolved boundary kind.

	The lists on `unit.program` are swapped for new ones; the previous lists
	are not modified.
	"""
	if kind is BoundaryKind.NONE:
		raise ValueError("rewrite_module requires a client or server boundary")
	rewriter = ReferenceRewriter(reference_id, config.adapter_module)
	program = unit.program
	if kind is BoundaryKind.CLIENT:
		body = rewriter.client_proxy()
	elif config.preserve_server_body:
		body = list(program.body) + rewriter.server_registration()
	else:
		body = rewriter.server_registration()
	program.body = body
	program.directives = []
