"""Shared pytest fixtures for formflow tests."""

from typing import Any

import pytest

from formflow.core.ir import CellMode, FieldCell


@pytest.fixture
def form_schema() -> dict[str, Any]:
    """Return a small onboarding form with a nested group and decorative nodes."""
    return {
        "type": "default",
        "id": "onboarding",
        "components": [
            {"type": "text", "text": "# Customer onboarding"},
            {"type": "textfield", "key": "name", "label": "Name"},
            {
                "type": "group",
                "key": "address",
                "label": "Address",
                "components": [
                    {"type": "textfield", "key": "street", "label": "Street"},
                    {
                        "type": "textfield",
                        "key": "city",
                        "label": "City",
                        "validate": {"required": True},
                    },
                ],
            },
            {
                "type": "number",
                "key": "amount",
                "label": "Amount",
                "conditional": {"hide": "= amount == null"},
            },
            {"type": "textarea", "key": "review_note", "label": "Review note"},
            {"type": "button", "key": "submit", "label": "Submit"},
        ],
    }


@pytest.fixture
def matrix() -> dict[str, dict[str, FieldCell]]:
    """Return a matrix over entry/review/archive states."""
    return {
        "name": {
            "entry": FieldCell(mode=CellMode.EDITABLE, required=True),
            "review": FieldCell(mode=CellMode.READONLY),
            "archive": FieldCell(mode=CellMode.READONLY),
        },
        "amount": {
            "entry": FieldCell(mode=CellMode.EDITABLE),
            "review": FieldCell(mode=CellMode.READONLY),
        },
        "review_note": {
            "entry": FieldCell(mode=CellMode.HIDDEN),
            "review": FieldCell(mode=CellMode.EDITABLE, required=True),
            "archive": FieldCell(mode=CellMode.READONLY),
        },
    }
