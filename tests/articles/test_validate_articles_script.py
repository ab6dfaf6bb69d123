from __future__ import annotations

import importlib.util
import json
import logging
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "validate_articles.py"


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("validate_articles", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    yield module
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in saved[0]:
        root.addHandler(handler)
    root.setLevel(saved[1])


def test_script_reports_failures(script, tmp_path, capsys, valid_article):
    path = tmp_path / "articles.json"
    path.write_text(json.dumps([valid_article, {"title": "x"}]), encoding="utf-8")

    code = script.main([str(path), "--publish"])

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert code == 1
    assert [line["success"] for line in lines] == [True, False]
    assert lines[1]["errors"]


def test_script_force_mode_succeeds(script, tmp_path, capsys):
    path = tmp_path / "article.json"
    path.write_text(json.dumps({"title": "x"}), encoding="utf-8")

    code = script.main([str(path), "--force"])

    payload = json.loads(capsys.readouterr().out.strip())
    assert code == 0
    assert payload["record"]["status"] == "DRAFT"
    assert payload["warnings"]


def test_script_unreadable_file(script, tmp_path):
    assert script.main([str(tmp_path / "missing.json")]) == 2
