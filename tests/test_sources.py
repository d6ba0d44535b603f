"""Tests for replacement source loading."""

import json
import pytest
from unittest.mock import patch
from replacetmpl.lib.errors import ReplacementSourceError
from replacetmpl.lib.sources import source_load, sources_load


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_source_load(tmp_path):
    path = write_json(tmp_path / "package.json", {"title": "Boaty", "major": 1})
    assert source_load(path) == {"title": "Boaty", "major": 1}


def test_sources_keep_order(tmp_path):
    first = write_json(tmp_path / "first.json", {"k": "A"})
    second = write_json(tmp_path / "second.json", {"k": "B"})
    assert sources_load([first, second]) == [{"k": "A"}, {"k": "B"}]


def test_missing_file(tmp_path):
    with pytest.raises(ReplacementSourceError, match="missing.json"):
        source_load(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ReplacementSourceError, match="invalid JSON"):
        source_load(path)


def test_not_an_object(tmp_path):
    path = write_json(tmp_path / "list.json", ["title", "Boaty"])
    with pytest.raises(ReplacementSourceError, match="expected a JSON object"):
        source_load(path)


def test_unmatchable_key_logged(tmp_path):
    path = write_json(tmp_path / "keys.json", {"ok": "1", "not-ok": "2"})
    with patch("replacetmpl.lib.sources.LOG") as mock_log:
        data = source_load(path)
    assert data == {"ok": "1", "not-ok": "2"}
    logged = [call.args[0] for call in mock_log.call_args_list]
    assert any("not-ok" in message for message in logged)
    assert not any("'ok'" in message for message in logged)
