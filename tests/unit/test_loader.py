"""Tests for matrix, bundle and schema JSON loading."""

import json
from pathlib import Path

import pytest

from formflow.core.errors import LoadError
from formflow.core.ir import ActionContext, CellMode, FieldCell
from formflow.core.loader import (
    dump_bundles,
    dump_matrix,
    load_bundles,
    load_matrix,
    load_schema,
    write_json,
)


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data))
    return path


class TestLoadMatrix:
    def test_valid(self, tmp_path: Path):
        path = _write(
            tmp_path / "matrix.json",
            {"name": {"entry": {"mode": "editable", "required": True}, "review": {}}},
        )

        matrix = load_matrix(path)

        assert matrix["name"]["entry"] == FieldCell(mode=CellMode.EDITABLE, required=True)
        assert matrix["name"]["review"] == FieldCell()

    def test_invalid_mode(self, tmp_path: Path):
        path = _write(tmp_path / "matrix.json", {"name": {"entry": {"mode": "secret"}}})

        with pytest.raises(LoadError) as exc_info:
            load_matrix(path)

        assert "Invalid behavior matrix" in str(exc_info.value)
        assert "name.entry.mode" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "matrix.json"
        path.write_text("{not json")

        with pytest.raises(LoadError, match="Invalid JSON"):
            load_matrix(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(LoadError, match="Cannot read file"):
            load_matrix(tmp_path / "missing.json")

    def test_dump(self, matrix):
        data = dump_matrix(matrix)

        assert data["name"]["entry"] == {"mode": "editable", "required": True}
        assert data["amount"]["review"] == {"mode": "readonly", "required": False}


class TestLoadBundles:
    def test_valid(self, tmp_path: Path):
        path = _write(
            tmp_path / "bundles.json",
            [
                {
                    "state": "review",
                    "action": "view",
                    "rows": [
                        {"field_name": "name", "action_context": "view"},
                        {
                            "field_name": "note",
                            "action_context": "view",
                            "visible": False,
                            "required": True,
                        },
                    ],
                }
            ],
        )

        bundles = load_bundles(path)

        assert bundles[0].action == ActionContext.VIEW
        assert bundles[0].rows[0].visible is True
        assert bundles[0].rows[0].required is False
        assert bundles[0].rows[1].visible is False

    def test_missing_state(self, tmp_path: Path):
        path = _write(tmp_path / "bundles.json", [{"action": "view", "rows": []}])

        with pytest.raises(LoadError, match="Invalid behavior bundles"):
            load_bundles(path)

    def test_dump_round_trip(self, tmp_path: Path, matrix):
        from formflow.core.behaviors import bundles_from_matrix

        bundles = bundles_from_matrix(matrix, ["entry", "review"])
        path = _write(tmp_path / "bundles.json", dump_bundles(bundles))

        assert load_bundles(path) == bundles

    def test_dump_uses_strings(self, matrix):
        from formflow.core.behaviors import bundles_from_matrix

        data = dump_bundles(bundles_from_matrix(matrix, ["entry"]))

        assert data[0]["action"] == "create"
        assert data[0]["rows"][0] == {
            "field_name": "name",
            "action_context": "create",
            "visible": True,
            "required": True,
        }


class TestLoadSchema:
    def test_valid(self, tmp_path: Path, form_schema):
        path = _write(tmp_path / "form.json", form_schema)

        assert load_schema(path) == form_schema

    def test_not_an_object(self, tmp_path: Path):
        path = _write(tmp_path / "form.json", [1, 2])

        with pytest.raises(LoadError, match="must be a JSON object"):
            load_schema(path)


def test_write_json_creates_parents(tmp_path: Path):
    path = write_json(tmp_path / "a" / "b" / "out.json", {"x": 1})

    assert json.loads(path.read_text()) == {"x": 1}
