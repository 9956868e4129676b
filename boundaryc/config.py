# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Pass configuration.

The configuration file is a flat JSON object:

    {
      "adapter_module": "react-server-dom-webpack/server",
      "rewrite_policy": "server-only",
      "is_server_build": true,
      "preserve_server_body": false
    }

Every key is optional. Unknown keys are rejected so typos fail loudly.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

# Runtime module that provides `createClientModuleProxy` and
# `registerServerReference` to the generated code.
DEFAULT_ADAPTER_MODULE = "react-server-dom-webpack/server"


class RewritePolicy(Enum):
	"""When a module carrying a boundary directive has its body replaced."""

	ALWAYS = "always"
	SERVER_ONLY = "server-only"


@dataclass(frozen=True)
class PassConfig:
	adapter_module: str = DEFAULT_ADAPTER_MODULE
	rewrite_policy: RewritePolicy = RewritePolicy.SERVER_ONLY
	is_server_build: bool = False
	# Keep the server module's own statements and append the registration
	# wrapper after them instead of clearing the body.
	preserve_server_body: bool = False

	def should_rewrite(self) -> bool:
		if self.rewrite_policy is RewritePolicy.ALWAYS:
			return True
		return self.is_server_build

	def with_overrides(self, **overrides: Any) -> "PassConfig":
		"""Return a copy with every non-None override applied."""
		return replace(self, **{k: v for k, v in overrides.items() if v is not None})

	def to_dict(self) -> dict[str, Any]:
		return {
			"adapter_module": self.adapter_module,
			"rewrite_policy": self.rewrite_policy.value,
			"is_server_build": self.is_server_build,
			"preserve_server_body": self.preserve_server_body,
		}


def parse_rewrite_policy(value: str) -> RewritePolicy:
	try:
		return RewritePolicy(value)
	except ValueError:
		allowed = ", ".join(p.value for p in RewritePolicy)
		raise ValueError(f"config field 'rewrite_policy' must be one of: {allowed} (got {value!r})") from None


def pass_config_from_mapping(data: Mapping[str, Any]) -> PassConfig:
	allowed = {f.name for f in fields(PassConfig)}
	unknown = sorted(set(data.keys()) - allowed)
	if unknown:
		raise ValueError(f"config has unknown fields: {', '.join(unknown)}")
	kwargs: dict[str, Any] = {}
	if "adapter_module" in data:
		adapter = data["adapter_module"]
		if not isinstance(adapter, str) or not adapter:
			raise ValueError("config field 'adapter_module' must be a non-empty string")
		kwargs["adapter_module"] = adapter
	if "rewrite_policy" in data:
		policy = data["rewrite_policy"]
		if not isinstance(policy, str):
			raise ValueError("config field 'rewrite_policy' must be a string")
		kwargs["rewrite_policy"] = parse_rewrite_policy(policy)
	for flag in ("is_server_build", "preserve_server_body"):
		if flag in data:
			if not isinstance(data[flag], bool):
				raise ValueError(f"config field '{flag}' must be a boolean")
			kwargs[flag] = data[flag]
	return PassConfig(**kwargs)


def load_pass_config(path: Path) -> PassConfig:
	data = json.loads(path.read_text(encoding="utf-8"))
	if not isinstance(data, dict):
		raise ValueError("config must be a JSON object")
	return pass_config_from_mapping(data)


__all__ = [
	"DEFAULT_ADAPTER_MODULE",
	"RewritePolicy",
	"PassConfig",
	"parse_rewrite_policy",
	"pass_config_from_mapping",
	"load_pass_config",
]
