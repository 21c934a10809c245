"""End-to-end tests of the RPC surface against the in-memory document store."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from template_service.core.config import Settings
from template_service.core.container import ApplicationContainer
from template_service.interfaces.rpc.errors import RPC_STATUS_HEADER
from template_service.main import create_app

from .conftest import FaultyCollection, FaultyStore

BASE = "/v1.TemplateService"


def call(client: TestClient, method: str, payload: dict):
    return client.post(f"{BASE}/{method}", json=payload)


def test_full_lifecycle(client: TestClient) -> None:
    created = call(client, "Create", {"api": "v1", "template": {"items": ["a"]}})
    assert created.status_code == 200
    assert created.headers[RPC_STATUS_HEADER] == "OK"
    body = created.json()
    assert body["api"] == "v1"
    template_id = body["id"]
    assert template_id

    read = call(client, "Read", {"api": "v1", "id": template_id}).json()
    assert read["api"] == "v1"
    assert read["template"]["id"] == template_id
    assert read["template"]["items"] == ["a"]
    assert read["template"]["created"] == read["template"]["updated"]

    updated = call(client, "Update", {"api": "v1", "template": {"id": template_id, "items": ["a", "b"]}})
    assert updated.json() == {"api": "v1", "updated": 1}

    read = call(client, "Read", {"api": "v1", "id": template_id}).json()
    assert read["template"]["items"] == ["a", "b"]

    deleted = call(client, "Delete", {"api": "v1", "id": template_id})
    assert deleted.json() == {"api": "v1", "deleted": 1}

    missing = call(client, "Read", {"api": "v1", "id": template_id})
    assert missing.status_code == 500
    assert missing.headers[RPC_STATUS_HEADER] == "UNKNOWN"
    assert missing.json() == {"code": "UNKNOWN", "message": "failed to find document-> no documents in result"}


def test_create_ignores_caller_supplied_identity(client: TestClient) -> None:
    payload = {
        "api": "v1",
        "template": {
            "id": "chosen-by-caller",
            "items": [1],
            "created": "2000-01-01T00:00:00Z",
            "updated": "2000-01-01T00:00:00Z",
        },
    }
    template_id = call(client, "Create", payload).json()["id"]

    assert template_id != "chosen-by-caller"
    template = call(client, "Read", {"id": template_id}).json()["template"]
    assert not template["created"].startswith("2000")
    assert call(client, "Read", {"id": "chosen-by-caller"}).status_code == 500


def test_unspecified_api_version_is_accepted(client: TestClient) -> None:
    response = call(client, "Create", {"template": {"items": []}})

    assert response.status_code == 200
    assert response.json()["api"] == "v1"


@pytest.mark.parametrize(
    "method, payload",
    [
        ("Create", {"api": "v2", "template": {"items": []}}),
        ("Read", {"api": "v2", "id": "x"}),
        ("Update", {"api": "v2", "template": {"id": "x", "items": []}}),
        ("Delete", {"api": "v2", "id": "x"}),
        ("List", {"api": "v2"}),
    ],
)
def test_unsupported_version_is_unimplemented(client: TestClient, store, method: str, payload: dict) -> None:
    response = call(client, method, payload)

    assert response.status_code == 501
    assert response.headers[RPC_STATUS_HEADER] == "UNIMPLEMENTED"
    assert response.json() == {
        "code": "UNIMPLEMENTED",
        "message": "unsupported API version: service implements API version 'v1', but asked for 'v2'",
    }
    assert len(store.collection("template", "template")) == 0


def test_update_and_delete_of_unknown_id_succeed_with_zero(client: TestClient) -> None:
    updated = call(client, "Update", {"api": "v1", "template": {"id": "nope", "items": ["x"]}})
    deleted = call(client, "Delete", {"api": "v1", "id": "nope"})

    assert updated.status_code == 200
    assert updated.json() == {"api": "v1", "updated": 0}
    assert deleted.status_code == 200
    assert deleted.json() == {"api": "v1", "deleted": 0}


def test_list_returns_created_templates(client: TestClient) -> None:
    assert call(client, "List", {"api": "v1"}).json() == {"api": "v1", "templates": []}

    ids = {call(client, "Create", {"api": "v1", "template": {"items": [n]}}).json()["id"] for n in range(3)}
    listed = call(client, "List", {"api": "v1"}).json()

    assert {template["id"] for template in listed["templates"]} == ids


def test_malformed_request_is_invalid_argument(client: TestClient) -> None:
    response = call(client, "Read", {"api": "v1", "id": {"nested": True}})

    assert response.status_code == 400
    assert response.headers[RPC_STATUS_HEADER] == "INVALID_ARGUMENT"
    assert response.json()["code"] == "INVALID_ARGUMENT"
    assert response.json()["message"].startswith("invalid request-> ")


def test_backend_failure_on_list_returns_no_templates(settings: Settings) -> None:
    collection = FaultyCollection(failing={"find"})
    app: FastAPI = create_app(settings, ApplicationContainer(settings=settings, store=FaultyStore(collection)))

    with TestClient(app) as client:
        response = call(client, "List", {"api": "v1"})

    assert response.status_code == 500
    assert response.json() == {
        "code": "UNKNOWN",
        "message": "failed to find documents in template.template-> find unavailable",
    }


def test_interceptor_logs_rejected_versions_as_warnings(client: TestClient, caplog) -> None:
    with caplog.at_level("DEBUG", logger="template_service"):
        call(client, "List", {"api": "v2"})
        call(client, "List", {"api": "v1"})

    records = [record for record in caplog.records if record.name == "template_service.interfaces.rpc.middleware"]
    assert [record.levelname for record in records] == ["WARNING", "INFO"]
    assert "code=UNIMPLEMENTED" in records[0].getMessage()
    assert "code=OK" in records[1].getMessage()
