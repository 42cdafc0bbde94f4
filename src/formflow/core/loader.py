"""
JSON loading and writing for matrices, bundles and form schemas.

This is the only place authoring data is validated: malformed files raise
``LoadError`` here, so the engine downstream never has to.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from formflow.core.errors import ErrorContext, LoadError
from formflow.core.ir import BehaviorBundle, BehaviorMatrix

logger = logging.getLogger(__name__)

_matrix_adapter: TypeAdapter[BehaviorMatrix] = TypeAdapter(BehaviorMatrix)
_bundles_adapter: TypeAdapter[list[BehaviorBundle]] = TypeAdapter(list[BehaviorBundle])


def _read_json(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"Cannot read file: {e.strerror}", ErrorContext(file=path)) from e
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise LoadError(
            f"Invalid JSON: {e.msg}",
            ErrorContext(file=path, detail=f"line {e.lineno}, column {e.colno}"),
        ) from e


def _first_error_detail(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]


def load_matrix(path: Path) -> BehaviorMatrix:
    """Load a behavior matrix: {field: {state: {mode, required}}}."""
    data = _read_json(path)
    try:
        matrix = _matrix_adapter.validate_python(data)
    except ValidationError as e:
        raise LoadError(
            f"Invalid behavior matrix ({e.error_count()} errors)",
            ErrorContext(file=path, detail=_first_error_detail(e)),
        ) from e
    logger.debug("Loaded matrix with %d fields from %s", len(matrix), path)
    return matrix


def load_bundles(path: Path) -> list[BehaviorBundle]:
    """Load a behavior bundle list: [{state, action, rows}]."""
    data = _read_json(path)
    try:
        bundles = _bundles_adapter.validate_python(data)
    except ValidationError as e:
        raise LoadError(
            f"Invalid behavior bundles ({e.error_count()} errors)",
            ErrorContext(file=path, detail=_first_error_detail(e)),
        ) from e
    logger.debug("Loaded %d bundles from %s", len(bundles), path)
    return bundles


def load_schema(path: Path) -> dict[str, Any]:
    """Load a form-js schema document (a JSON object)."""
    data = _read_json(path)
    if not isinstance(data, dict):
        raise LoadError("Form schema must be a JSON object", ErrorContext(file=path))
    return data


def dump_matrix(matrix: BehaviorMatrix) -> dict[str, Any]:
    """Convert a matrix to plain JSON data."""
    return _matrix_adapter.dump_python(matrix, mode="json")


def dump_bundles(bundles: list[BehaviorBundle]) -> list[dict[str, Any]]:
    """Convert bundles to plain JSON data."""
    return _bundles_adapter.dump_python(bundles, mode="json")


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2) + "\n"


def write_json(path: Path, data: Any) -> Path:
    """Write JSON data, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(data), encoding="utf-8")
    logger.info("Wrote %s", path)
    return path
