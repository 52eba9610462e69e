# src/tests/integration/test_api_sort.py

import pytest
from fastapi.testclient import TestClient
from src.api.main import app # Import the FastAPI app instance
from src.api.v1.sorting import to_column_options
from src.core.config.settings import settings
from src.core.enums.sort_value_projection import SortValueProjection
from src.core.models.request import ColumnSortOptionsPayload
from src.core.models.response import SortResponse
from src.logic.sort_values import natural_value


@pytest.fixture(scope="module")
def client():
    """Provides a TestClient for the FastAPI application."""
    with TestClient(app) as c:
        yield c

# Sample row payloads
def get_sample_row(id, sub_rows=None, **values):
    row = {
        "id": id,
        "cells": {column_id: {"kind": "data", "value": value} for column_id, value in values.items()}
    }
    if sub_rows is not None:
        row["sub_rows"] = sub_rows
    return row

def get_sample_people():
    return [
        get_sample_row("bob30", name="Bob", age=30),
        get_sample_row("amy30", name="Amy", age=30),
        get_sample_row("amy25", name="Amy", age=25),
    ]

def ids(rows):
    return [row["id"] for row in rows]

# --- Test Cases ---

def test_sort_multi_key(client):
    """Test sorting by age descending, then name ascending."""
    request_body = {
        "rows": get_sample_people(),
        "sort_keys": [{"id": "age", "order": "desc"}, {"id": "name", "order": "asc"}]
    }
    response = client.post("/api/v1/sort", json=request_body)
    assert response.status_code == 200
    response_data = response.json()
    SortResponse.model_validate(response_data)

    assert ids(response_data["rows"]) == ["amy30", "bob30", "amy25"]
    assert response_data["sort_keys"] == request_body["sort_keys"]

def test_sort_sub_rows_and_display_cells(client):
    """Test recursive sorting with a display cell column that gives no ordering signal."""
    parent = get_sample_row("parent", v=1, sub_rows=[get_sample_row("c2", v=2), get_sample_row("c1", v=1)])
    parent["cells"]["actions"] = {"kind": "display", "label": "Edit"}
    request_body = {
        "rows": [get_sample_row("other", v=5), parent],
        "sort_keys": [{"id": "actions", "order": "asc"}, {"id": "v", "order": "asc"}]
    }
    response = client.post("/api/v1/sort", json=request_body)
    assert response.status_code == 200
    rows = response.json()["rows"]

    assert ids(rows) == ["parent", "other"]
    assert ids(rows[0]["sub_rows"]) == ["c1", "c2"]
    assert rows[0]["cells"]["actions"] == {"kind": "display", "label": "Edit"}
    assert rows[1]["sub_rows"] is None

def test_sort_with_column_options(client):
    """Test invert and a named sort value projection."""
    request_body = {
        "rows": [
            get_sample_row("r10", label="row10", age=1),
            get_sample_row("r9", label="Row9", age=2),
            get_sample_row("r1", label="row1", age=3),
        ],
        "sort_keys": [{"id": "label", "order": "asc"}],
        "column_options": {"label": {"sort_value": "natural"}, "age": {"invert": True}}
    }
    response = client.post("/api/v1/sort", json=request_body)
    assert response.status_code == 200
    assert ids(response.json()["rows"]) == ["r1", "r9", "r10"]

    request_body["sort_keys"] = [{"id": "age", "order": "asc"}]
    response = client.post("/api/v1/sort", json=request_body)
    assert ids(response.json()["rows"]) == ["r1", "r9", "r10"]

def test_sort_natural_with_non_decimal_digits(client):
    """Test that natural sorting accepts digit-like characters that are not decimal digits."""
    request_body = {
        "rows": [
            get_sample_row("sup", m="²"),
            get_sample_row("one", m="1"),
            get_sample_row("area", m="m²2"),
        ],
        "sort_keys": [{"id": "m", "order": "asc"}],
        "column_options": {"m": {"sort_value": "natural"}}
    }
    response = client.post("/api/v1/sort", json=request_body)
    assert response.status_code == 200
    assert ids(response.json()["rows"]) == ["one", "area", "sup"]

def test_to_column_options():
    column_options = to_column_options({
        "name": ColumnSortOptionsPayload(sort_value=SortValueProjection.NATURAL),
        "age": ColumnSortOptionsPayload(invert=True),
        "actions": ColumnSortOptionsPayload(disable=True),
    })

    assert column_options["name"].get_sort_value is natural_value
    assert column_options["age"].invert is True
    assert column_options["age"].get_sort_value is None
    assert column_options["actions"].disable is True

def test_sort_without_keys_keeps_order(client):
    response = client.post("/api/v1/sort", json={"rows": get_sample_people()})
    assert response.status_code == 200
    assert ids(response.json()["rows"]) == ["bob30", "amy30", "amy25"]

def test_sort_rejects_too_deep_forest(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_ROW_DEPTH", 1)
    nested = get_sample_row("root", v=1, sub_rows=[get_sample_row("child", v=1, sub_rows=[get_sample_row("leaf", v=1)])])
    response = client.post("/api/v1/sort", json={"rows": [nested], "sort_keys": [{"id": "v", "order": "asc"}]})
    assert response.status_code == 422
    assert "child" in response.json()["detail"]

def test_sort_rejects_invalid_payload(client):
    response = client.post("/api/v1/sort", json={
        "rows": [{"id": "x", "cells": {"v": {"kind": "chart"}}}],
        "sort_keys": [{"id": "v", "order": "sideways"}]
    })
    assert response.status_code == 422

@pytest.mark.parametrize("sort_keys, event, expected", [
    ([], {}, [{"id": "age", "order": "asc"}]),
    ([{"id": "age", "order": "asc"}], {}, [{"id": "age", "order": "desc"}]),
    ([{"id": "age", "order": "desc"}], {}, []),
    ([{"id": "name", "order": "asc"}], {}, [{"id": "age", "order": "asc"}]),
    ([{"id": "name", "order": "asc"}], {"shift_key": True}, [{"id": "name", "order": "asc"}, {"id": "age", "order": "asc"}]),
    ([{"id": "age", "order": "asc"}, {"id": "name", "order": "asc"}], {"shift_key": True},
     [{"id": "age", "order": "desc"}, {"id": "name", "order": "asc"}]),
])
def test_toggle_sort_key(client, sort_keys, event, expected):
    """Test the toggle transitions for single and shift-held (multi) toggles."""
    response = client.post("/api/v1/sort-keys/toggle", json={
        "sort_keys": sort_keys, "column_id": "age", "event": event
    })
    assert response.status_code == 200
    assert response.json()["sort_keys"] == expected

def test_toggle_disabled_column_unchanged(client):
    sort_keys = [{"id": "name", "order": "asc"}]
    response = client.post("/api/v1/sort-keys/toggle", json={
        "sort_keys": sort_keys, "column_id": "age", "column_options": {"age": {"disable": True}}
    })
    assert response.status_code == 200
    assert response.json()["sort_keys"] == sort_keys

def test_toggle_with_multi_sort_disabled(client, monkeypatch):
    monkeypatch.setattr(settings, "DISABLE_MULTI_SORT", True)
    response = client.post("/api/v1/sort-keys/toggle", json={
        "sort_keys": [{"id": "name", "order": "asc"}], "column_id": "age", "event": {"shift_key": True}
    })
    assert response.status_code == 200
    assert response.json()["sort_keys"] == [{"id": "age", "order": "asc"}]

def test_clear_sort_key(client):
    sort_keys = [{"id": "age", "order": "asc"}, {"id": "name", "order": "desc"}, {"id": "city", "order": "asc"}]
    response = client.post("/api/v1/sort-keys/clear", json={"sort_keys": sort_keys, "column_id": "name"})
    assert response.status_code == 200
    assert response.json()["sort_keys"] == [{"id": "age", "order": "asc"}, {"id": "city", "order": "asc"}]

    response = client.post("/api/v1/sort-keys/clear", json={"sort_keys": sort_keys, "column_id": "unknown"})
    assert response.json()["sort_keys"] == sort_keys

def test_root_redirects_to_docs(client):
    response = client.get("/", follow_redirects=False)
    assert response.status_code in (302, 307)
    assert response.headers["location"] == "/docs"
