import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from types import SimpleNamespace
from unittest.mock import AsyncMock
from uuid import uuid4
from datetime import datetime, timezone

from legalaid.api.deps import get_session_service
from legalaid.api.errors import register_exception_handlers
from legalaid.api.routers.sessions import router as sessions_router
from legalaid.application.services.session_service import HistoryPage, SessionListItem, SessionListPage
from legalaid.core.exceptions import (
    AuthenticationRequiredError,
    PersistenceError,
    SessionForbiddenError,
    SessionNotFoundError,
    ValidationError,
)
from legalaid.core.identity import Caller

NOW = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)


def _session_row(session_id="chat_abc", **overrides):
    values = {
        "session_id": session_id,
        "name": "Legal Consultation",
        "context": {"resolved": False},
        "last_accessed": NOW,
        "active": True,
        "created_at": NOW,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def _message_row(role="user", content="hello", feedback=()):
    return SimpleNamespace(
        message_id=uuid4(),
        role=role,
        content=content,
        language="en",
        timestamp=NOW,
        audio_url=None,
        message_metadata=None,
        feedback=list(feedback),
    )


@pytest.fixture
def app():
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(sessions_router)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_session_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_session_service] = lambda: service
    return service


def test_create_session(client, mock_session_service):
    mock_session_service.create_session.return_value = _session_row()

    response = client.post(
        "/chat/sessions",
        json={"name": "Rent dispute", "context": {"region": "Ashanti"}},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 201
    assert response.json() == {
        "success": True,
        "sessionId": "chat_abc",
        "message": "Chat session created successfully",
    }
    caller = mock_session_service.create_session.call_args.args[0]
    assert caller == Caller(id="user-1", is_anonymous=False)
    assert mock_session_service.create_session.call_args.kwargs == {
        "context": {"region": "Ashanti"},
        "name": "Rent dispute",
    }


def test_create_session_takes_guest_status_from_headers_not_body(client, mock_session_service):
    mock_session_service.create_session.return_value = _session_row()

    client.post(
        "/chat/sessions",
        json={"language": "tw", "isAnonymous": True},
        headers={"X-User-Id": "user-1"},
    )

    caller = mock_session_service.create_session.call_args.args[0]
    assert caller == Caller(id="user-1", is_anonymous=False)
    assert mock_session_service.create_session.call_args.kwargs == {"context": {}, "name": None}


def test_create_session_passes_anonymous_caller(client, mock_session_service):
    mock_session_service.create_session.return_value = _session_row()

    client.post("/chat/sessions")

    caller = mock_session_service.create_session.call_args.args[0]
    assert caller.id is None


def test_list_sessions(client, mock_session_service):
    mock_session_service.list_sessions.return_value = SessionListPage(
        items=[SessionListItem(session=_session_row(), message_count=4)],
        page=2,
        limit=1,
        total=3,
    )

    response = client.get("/chat/sessions", params={"page": 2, "limit": 1, "active": "true"}, headers={"X-User-Id": "u"})

    assert response.status_code == 200
    data = response.json()
    assert data["sessions"][0]["sessionId"] == "chat_abc"
    assert data["sessions"][0]["messageCount"] == 4
    assert data["pagination"] == {"page": 2, "limit": 1, "total": 3, "pages": 3}
    assert mock_session_service.list_sessions.call_args.kwargs == {"active": True, "page": 2, "limit": 1}


def test_list_sessions_rejects_bad_page(client, mock_session_service):
    response = client.get("/chat/sessions", params={"page": 0})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "page"
    mock_session_service.list_sessions.assert_not_called()


def test_list_sessions_unauthenticated(client, mock_session_service):
    mock_session_service.list_sessions.side_effect = AuthenticationRequiredError()

    response = client.get("/chat/sessions")

    assert response.status_code == 401


def test_get_history(client, mock_session_service):
    feedback = SimpleNamespace(rating=4, helpful=True, feedback=None, timestamp=NOW)
    mock_session_service.get_history.return_value = HistoryPage(
        messages=[_message_row(), _message_row("assistant", "reply", [feedback])],
        total=5,
        limit=2,
        offset=0,
        context={"legalTopic": "divorce"},
    )

    response = client.get("/chat/sessions/chat_abc/history", params={"limit": 2})

    assert response.status_code == 200
    data = response.json()
    assert data["sessionId"] == "chat_abc"
    assert [m["role"] for m in data["messages"]] == ["user", "assistant"]
    assert data["messages"][1]["feedback"][0]["rating"] == 4
    assert data["pagination"] == {"total": 5, "limit": 2, "offset": 0, "hasMore": True}
    assert data["context"] == {"legalTopic": "divorce"}


def test_get_history_not_found(client, mock_session_service):
    mock_session_service.get_history.side_effect = SessionNotFoundError("chat_missing")

    response = client.get("/chat/sessions/chat_missing/history")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Chat session not found", "errors": None}


def test_update_session(client, mock_session_service):
    mock_session_service.update_session.return_value = _session_row(context={"resolved": True}, active=False)

    response = client.put("/chat/sessions/chat_abc", json={"context": {"resolved": True}, "active": False})

    assert response.status_code == 200
    assert response.json()["active"] is False
    assert mock_session_service.update_session.call_args.kwargs == {
        "context": {"resolved": True},
        "active": False,
        "name": None,
    }


def test_update_session_forbidden(client, mock_session_service):
    mock_session_service.update_session.side_effect = SessionForbiddenError("chat_abc", "user-2")

    response = client.put("/chat/sessions/chat_abc", json={"active": False}, headers={"X-User-Id": "user-2"})

    assert response.status_code == 403


def test_delete_session_defaults_to_confirmed(client, mock_session_service):
    response = client.delete("/chat/sessions/chat_abc")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Chat session deleted successfully"}
    assert mock_session_service.delete_session.call_args.kwargs == {"confirm": True}


def test_delete_session_unconfirmed(client, mock_session_service):
    mock_session_service.delete_session.side_effect = ValidationError(
        "Delete confirmation must be true", field="confirmDelete"
    )

    response = client.request("DELETE", "/chat/sessions/chat_abc", json={"confirmDelete": False})

    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "confirmDelete", "message": "Delete confirmation must be true"}]
    assert mock_session_service.delete_session.call_args.kwargs == {"confirm": False}


def test_persistence_failure_is_generic_500(client, mock_session_service):
    mock_session_service.create_session.side_effect = PersistenceError("Failed to persist chat session", {"error": "boom"})

    response = client.post("/chat/sessions")

    assert response.status_code == 500
    assert "boom" not in response.text
    assert response.json()["message"] == "An internal error occurred. Please try again later."
