# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import json
from pathlib import Path

import pytest

from boundaryc.driver import main
from boundaryc.test_support import const_decl, export_default, export_named, fn_decl, ident, program_json


def _write(path: Path, doc: dict) -> Path:
	path.write_text(json.dumps(doc), encoding="utf-8")
	return path


def test_client_module_json_summary(tmp_path: Path, capsys) -> None:
	src = _write(tmp_path / "Button.js.json", program_json(export_default(ident("Button")), directives=["use client"]))
	rc = main([str(src), "--filename", "/app/Button.js", "--server", "--json"])
	assert rc == 0
	payload = json.loads(capsys.readouterr().out)
	assert payload["exit_code"] == 0
	assert payload["diagnostics"] == []
	mod = payload["modules"][0]
	assert mod["boundary"] == "client"
	assert mod["rewritten"] is True
	assert mod["manifest"] == {"entryPoint": "file:///app/Button.js", "exports": ["default"]}
	assert "createClientModuleProxy(\"file:///app/Button.js\")" in mod["output"]


def test_filename_from_tree_loc_and_out_dir(tmp_path: Path) -> None:
	src = _write(
		tmp_path / "actions.js.json",
		program_json(export_named(fn_decl("save")), directives=["use server"], filename="/app/actions.js"),
	)
	out_dir = tmp_path / "out"
	rc = main([str(src), "--server", "-o", str(out_dir)])
	assert rc == 0
	text = (out_dir / "actions.js").read_text(encoding="utf-8")
	assert 'registerServerReference(module.exports, "file:///app/actions.js", null);' in text


def test_estree_emit(tmp_path: Path) -> None:
	src = _write(tmp_path / "a.json", program_json(export_named(const_decl("x")), directives=["use client"]))
	out_dir = tmp_path / "out"
	rc = main([str(src), "--filename", "/app/a.js", "--rewrite-policy", "always", "--emit", "estree", "-o", str(out_dir)])
	assert rc == 0
	doc = json.loads((out_dir / "a.json").read_text(encoding="utf-8"))
	assert doc["type"] == "File"
	program = doc["program"]
	assert program["type"] == "Program"
	assert program["directives"] == []
	assert program["body"][0]["expression"]["type"] == "AssignmentExpression"


def test_estree_emit_keeps_bare_program_shape(tmp_path: Path, capsys) -> None:
	doc = program_json(export_named(const_decl("x")), directives=["use client"], filename="/app/a.js")["program"]
	src = _write(tmp_path / "a.json", doc)
	rc = main([str(src), "--rewrite-policy", "always", "--emit", "estree"])
	assert rc == 0
	out = json.loads(capsys.readouterr().out)
	assert out["type"] == "Program"
	assert out["directives"] == []


def test_untouched_module_estree_is_verbatim(tmp_path: Path, capsys) -> None:
	original = program_json(export_named(const_decl("x")), directives=["use strict"])
	src = _write(tmp_path / "plain.json", original)
	rc = main([str(src), "--emit", "estree"])
	assert rc == 0
	assert json.loads(capsys.readouterr().out) == original


def test_untouched_unprintable_module_only_warns(tmp_path: Path, capsys) -> None:
	src = _write(tmp_path / "plain.json", program_json(export_named(const_decl("x"))))
	rc = main([str(src)])
	assert rc == 0
	assert "warning: cannot print node of type 'NumericLiteral'" in capsys.readouterr().err


def test_conflict_fails_but_other_modules_continue(tmp_path: Path, capsys) -> None:
	bad = _write(tmp_path / "bad.json", program_json(directives=["use client", "use server"], filename="/app/bad.js"))
	good = _write(tmp_path / "good.json", program_json(directives=["use client"], filename="/app/good.js"))
	rc = main([str(bad), str(good), "--server", "--json"])
	assert rc == 1
	payload = json.loads(capsys.readouterr().out)
	assert payload["exit_code"] == 1
	[diag] = payload["diagnostics"]
	assert diag["code"] == "conflicting-boundary-directives"
	assert diag["phase"] == "boundary"
	assert diag["file"] == "/app/bad.js"
	assert diag["line"] == 2
	assert payload["modules"][0]["boundary"] is None
	assert payload["modules"][1]["rewritten"] is True


def test_missing_file_path_human_diagnostic(tmp_path: Path, capsys) -> None:
	src = _write(tmp_path / "anon.json", program_json(directives=["use server"]))
	rc = main([str(src), "--server"])
	assert rc == 1
	err = capsys.readouterr().err
	assert str(src) in err
	assert "error: Expected a filename" in err


def test_malformed_input(tmp_path: Path, capsys) -> None:
	src = tmp_path / "broken.json"
	src.write_text("not json", encoding="utf-8")
	rc = main([str(src), "--json"])
	assert rc == 1
	payload = json.loads(capsys.readouterr().out)
	assert payload["diagnostics"][0]["phase"] == "estree"


def test_config_file_and_invalid_config(tmp_path: Path, capsys) -> None:
	cfg = tmp_path / "cfg.json"
	cfg.write_text(json.dumps({"is_server_build": True, "adapter_module": "flight"}), encoding="utf-8")
	src = _write(tmp_path / "c.json", program_json(directives=["use client"], filename="/app/c.js"))
	assert main([str(src), "--config", str(cfg)]) == 0
	assert 'require("flight")' in capsys.readouterr().out

	cfg.write_text(json.dumps({"bogus": 1}), encoding="utf-8")
	assert main([str(src), "--config", str(cfg)]) == 1
	assert "invalid config" in capsys.readouterr().err


def test_filename_requires_single_source(tmp_path: Path) -> None:
	a = _write(tmp_path / "a.json", program_json())
	b = _write(tmp_path / "b.json", program_json())
	with pytest.raises(SystemExit) as exc:
		main([str(a), str(b), "--filename", "/x.js"])
	assert exc.value.code == 2


def _deep_chain_text(terms: int) -> str:
	"""`a0 + a1 + ... ` as raw JSON text, built without recursion."""
	expr = json.dumps({"type": "Identifier", "name": "a0"})
	for i in range(1, terms):
		right = json.dumps({"type": "Identifier", "name": f"a{i}"})
		expr = f'{{"type": "BinaryExpression", "operator": "+", "left": {expr}, "right": {right}}}'
	stmt = f'{{"type": "ExpressionStatement", "expression": {expr}}}'
	return f'{{"type": "Program", "sourceType": "module", "directives": [], "body": [{stmt}]}}'


def test_deeply_nested_module_does_not_stop_other_modules(tmp_path: Path, capsys) -> None:
	deep = tmp_path / "deep.json"
	deep.write_text(_deep_chain_text(699), encoding="utf-8")
	good = _write(tmp_path / "good.json", program_json(export_default(ident("Button")), directives=["use client"], filename="/app/good.js"))
	rc = main([str(deep), str(good), "--server", "--json"])
	assert rc == 0
	payload = json.loads(capsys.readouterr().out)
	first, second = payload["modules"]
	assert first["boundary"] == "none"
	assert [d["severity"] for d in payload["diagnostics"]] == ["warning"]
	assert second["rewritten"] is True
	assert "createClientModuleProxy" in second["output"]


def test_deeply_nested_module_estree_is_echoed(tmp_path: Path, capsys) -> None:
	deep = tmp_path / "deep.json"
	deep.write_text(_deep_chain_text(699), encoding="utf-8")
	good = _write(tmp_path / "good.json", program_json(export_named(const_decl("x")), directives=["use client"], filename="/app/good.js"))
	out_dir = tmp_path / "out"
	rc = main([str(deep), str(good), "--server", "--emit", "estree", "-o", str(out_dir)])
	assert rc == 0
	assert capsys.readouterr().err == ""
	echoed = json.loads((out_dir / "deep.json").read_text(encoding="utf-8"))
	assert echoed["body"][0]["expression"]["right"] == {"type": "Identifier", "name": "a698"}
	rewritten = json.loads((out_dir / "good.json").read_text(encoding="utf-8"))
	assert rewritten["type"] == "File"
	assert rewritten["program"]["directives"] == []
