"""Integration tests for the HTTP API."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import pytest

pytest.importorskip("fastapi")
import httpx
from fastapi.testclient import TestClient

from leaveflow.domain.entities import Event, NotificationKind, UserRole
from leaveflow.infrastructure.database import Base, engine, initialize_database
from leaveflow.infrastructure.notifications import SSEChannel, decode_frame
from main import create_app

from fakes import RecordingChannel


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client():
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def _register(client: TestClient, email: str, *, first_name: str = "Asha") -> dict:
    response = client.post(
        "/users/",
        json={
            "email": email,
            "password": "Secret123",
            "first_name": first_name,
            "last_name": "Rao",
        },
    )
    assert response.status_code == 201
    return response.json()


def _login(client: TestClient, email: str) -> dict[str, str]:
    response = client.post("/auth/token", data={"username": email, "password": "Secret123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def _make_admin(client: TestClient, email: str) -> tuple[dict, dict[str, str]]:
    user = _register(client, email, first_name="Dean")
    headers = _login(client, email)
    response = client.patch(f"/users/{user['id']}/role", json={"role": "admin"}, headers=headers)
    assert response.status_code == 200
    assert response.json()["role"] == "admin"
    return user, headers


def _leave_payload(**overrides) -> dict:
    payload = {
        "type": "sick",
        "start_date": "2024-03-04",
        "end_date": "2024-03-06",
        "reason": "Fever",
        "contact_info": "555-0100",
    }
    payload.update(overrides)
    return payload


def _attach(client: TestClient, user_id: str, role: UserRole) -> RecordingChannel:
    channel = RecordingChannel()
    client.app.state.connection_registry.admit(user_id, role, channel)
    return channel


def test_health_reports_connection_count(client: TestClient) -> None:
    response = client.get("/health")
    assert response.json() == {"status": "ok", "connections": 0}

    _attach(client, "u1", UserRole.STUDENT)

    assert client.get("/health").json()["connections"] == 1


def test_login_rejects_wrong_password(client: TestClient) -> None:
    _register(client, "asha@example.com")

    response = client.post(
        "/auth/token", data={"username": "asha@example.com", "password": "wrong-pass"}
    )

    assert response.status_code == 401


def test_leave_lifecycle_pushes_live_events(client: TestClient) -> None:
    student = _register(client, "asha@example.com")
    student_headers = _login(client, "asha@example.com")
    admin, admin_headers = _make_admin(client, "dean@example.com")
    student_stream = _attach(client, student["id"], UserRole.STUDENT)
    admin_stream = _attach(client, admin["id"], UserRole.ADMIN)

    created = client.post("/leaves", json=_leave_payload(), headers=student_headers)
    assert created.status_code == 201
    leave = created.json()
    assert leave["type"] == "sick"
    assert leave["status"] == "pending"
    assert leave["duration"] == 3

    assert [p["title"] for p in admin_stream.payloads()] == ["New Leave Request"]
    assert student_stream.frames == []

    admin_inbox = client.get("/notifications", headers=admin_headers).json()
    assert [n["title"] for n in admin_inbox] == ["New Leave Request"]
    assert admin_inbox[0]["type"] == "comment"

    approved = client.post(f"/admin/leaves/{leave['id']}/approve", headers=admin_headers)
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"

    pushed = student_stream.payloads()
    assert [p["title"] for p in pushed] == ["Leave Request Approved"]
    assert pushed[0]["type"] == "status"
    assert pushed[0]["createdAt"].endswith("Z")
    assert len(admin_stream.frames) == 1

    stats = client.get("/leaves/stats", headers=student_headers).json()
    assert stats == {
        "pending": 0,
        "approved": 1,
        "rejected": 0,
        "balance": 17,
        "balance_percentage": 85,
    }


def test_students_cannot_use_admin_routes(client: TestClient) -> None:
    _register(client, "asha@example.com")
    headers = _login(client, "asha@example.com")

    assert client.get("/admin/leaves", headers=headers).status_code == 403
    assert client.get("/admin/connections", headers=headers).status_code == 403
    response = client.post(
        "/admin/updates", json={"title": "Exam", "content": "Moved"}, headers=headers
    )
    assert response.status_code == 403


def test_student_cannot_view_another_students_leave(client: TestClient) -> None:
    _register(client, "asha@example.com")
    _register(client, "ravi@example.com", first_name="Ravi")
    asha = _login(client, "asha@example.com")
    ravi = _login(client, "ravi@example.com")
    leave_id = client.post("/leaves", json=_leave_payload(), headers=asha).json()["id"]

    assert client.get(f"/leaves/{leave_id}", headers=ravi).status_code == 403
    assert client.post(f"/leaves/{leave_id}/cancel", headers=ravi).status_code == 403
    assert client.get("/leaves/999", headers=asha).status_code == 404


def test_invalid_date_range_is_rejected(client: TestClient) -> None:
    _register(client, "asha@example.com")
    headers = _login(client, "asha@example.com")

    response = client.post(
        "/leaves",
        json=_leave_payload(start_date="2024-03-06", end_date="2024-03-04"),
        headers=headers,
    )

    assert response.status_code == 422


def test_comment_thread_and_submit_reminder(client: TestClient) -> None:
    student = _register(client, "asha@example.com")
    student_headers = _login(client, "asha@example.com")
    admin, admin_headers = _make_admin(client, "dean@example.com")
    student_stream = _attach(client, student["id"], UserRole.STUDENT)
    leave_id = client.post("/leaves", json=_leave_payload(), headers=student_headers).json()["id"]

    submitted = client.post(f"/leaves/{leave_id}/submit", headers=student_headers)
    assert submitted.json() == {
        "success": True,
        "message": "Leave request submitted to admin for review",
    }

    comment = client.post(
        f"/leaves/{leave_id}/comments", json={"content": "Please attach a note"}, headers=admin_headers
    )
    assert comment.status_code == 201

    assert [p["message"] for p in student_stream.payloads()] == [
        "Dean Rao commented on your leave request"
    ]
    detail = client.get(f"/leaves/{leave_id}", headers=student_headers).json()
    assert [c["content"] for c in detail["comments"]] == ["Please attach a note"]


def test_mark_notifications_read(client: TestClient) -> None:
    _register(client, "asha@example.com")
    student_headers = _login(client, "asha@example.com")
    _, admin_headers = _make_admin(client, "dean@example.com")
    leave_id = client.post("/leaves", json=_leave_payload(), headers=student_headers).json()["id"]
    client.post(f"/admin/leaves/{leave_id}/reject", headers=admin_headers)

    inbox = client.get("/notifications", headers=student_headers).json()
    assert inbox[0]["title"] == "Leave Request Rejected"
    assert inbox[0]["read"] is False

    # Another user's notification cannot be touched.
    admin_inbox = client.get("/notifications", headers=admin_headers).json()
    response = client.post(f"/notifications/read/{admin_inbox[0]['id']}", headers=student_headers)
    assert response.status_code == 403

    response = client.post(f"/notifications/read/{inbox[0]['id']}", headers=student_headers)
    assert response.status_code == 200
    assert response.json()["read"] is True

    assert client.post("/notifications/read-all", headers=admin_headers).json()["success"] is True
    assert all(n["read"] for n in client.get("/notifications", headers=admin_headers).json())


def test_role_change_rules(client: TestClient) -> None:
    asha = _register(client, "asha@example.com")
    ravi = _register(client, "ravi@example.com", first_name="Ravi")
    asha_headers = _login(client, "asha@example.com")

    response = client.patch(f"/users/{ravi['id']}/role", json={"role": "admin"}, headers=asha_headers)
    assert response.status_code == 403

    response = client.patch(f"/users/{asha['id']}/role", json={"role": "dean"}, headers=asha_headers)
    assert response.status_code == 400

    response = client.patch(f"/users/{asha['id']}/role", json={"role": "admin"}, headers=asha_headers)
    assert response.status_code == 200
    assert client.get("/users/me", headers=asha_headers).json()["role"] == "admin"


def test_event_stream_requires_a_valid_token(client: TestClient) -> None:
    assert client.get("/notifications/events").status_code == 401
    assert client.get("/notifications/events", params={"token": "garbage"}).status_code == 401


def test_admin_can_count_and_drop_connections(client: TestClient) -> None:
    _, admin_headers = _make_admin(client, "dean@example.com")
    channel = SSEChannel()
    connection_id = client.app.state.event_dispatcher.open("u1", UserRole.STUDENT, channel)

    assert client.get("/admin/connections", headers=admin_headers).json() == {"count": 1}

    response = client.delete(f"/admin/connections/{connection_id}", headers=admin_headers)
    assert response.status_code == 204
    assert channel.closed is True
    assert client.get("/admin/connections", headers=admin_headers).json() == {"count": 0}

    response = client.delete(f"/admin/connections/{connection_id}", headers=admin_headers)
    assert response.status_code == 404


def test_university_updates(client: TestClient) -> None:
    _register(client, "asha@example.com")
    student_headers = _login(client, "asha@example.com")
    _, admin_headers = _make_admin(client, "dean@example.com")

    created = client.post(
        "/admin/updates",
        json={"title": "Library hours", "content": "Open until midnight during exams"},
        headers=admin_headers,
    )
    assert created.status_code == 201

    updates = client.get("/updates", headers=student_headers).json()
    assert [u["title"] for u in updates] == ["Library hours"]


def test_profile_update(client: TestClient) -> None:
    _register(client, "asha@example.com")
    headers = _login(client, "asha@example.com")

    response = client.patch("/users/profile", json={"branch": "CSE"}, headers=headers)
    assert response.status_code == 200
    assert response.json()["branch"] == "CSE"

    response = client.patch("/users/profile", json={"role": "admin"}, headers=headers)
    assert response.status_code == 422


class _EventStream:
    """Drive ``/notifications/events`` over raw ASGI.

    ``TestClient`` waits for the whole response body, which never happens for
    a live stream, so the request is run as a task and frames are read as the
    application sends them.
    """

    def __init__(self, app, token: str) -> None:
        self.app = app
        self.token = token
        self.status: int | None = None
        self.headers: dict[bytes, bytes] = {}
        self._chunks: asyncio.Queue[str] = asyncio.Queue()
        self._request_sent = False
        self._disconnected = asyncio.Event()
        self._task: asyncio.Task | None = None

    async def _receive(self) -> dict:
        if not self._request_sent:
            self._request_sent = True
            return {"type": "http.request", "body": b"", "more_body": False}
        await self._disconnected.wait()
        return {"type": "http.disconnect"}

    async def _send(self, message: dict) -> None:
        if message["type"] == "http.response.start":
            self.status = message["status"]
            self.headers = dict(message.get("headers", []))
        elif message["type"] == "http.response.body" and message.get("body"):
            await self._chunks.put(message["body"].decode())

    def start(self) -> "_EventStream":
        scope = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": "GET",
            "scheme": "http",
            "path": "/notifications/events",
            "raw_path": b"/notifications/events",
            "root_path": "",
            "query_string": f"token={self.token}".encode(),
            "headers": [(b"host", b"testserver")],
            "client": ("testclient", 50000),
            "server": ("testserver", 80),
        }
        self._task = asyncio.create_task(self.app(scope, self._receive, self._send))
        return self

    async def next_payload(self) -> dict:
        frame = await asyncio.wait_for(self._chunks.get(), timeout=5)
        return decode_frame(frame)

    def has_pending(self) -> bool:
        return not self._chunks.empty()

    async def close(self) -> None:
        self._disconnected.set()
        await asyncio.wait_for(self._task, timeout=5)


def _token(client: TestClient, email: str) -> str:
    return _login(client, email)["Authorization"].removeprefix("Bearer ")


def _ping(event_id: int) -> Event:
    return Event(
        id=event_id,
        title="Ping",
        message=f"ping {event_id}",
        kind=NotificationKind.ALERT,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def test_event_stream_delivers_handshake_and_events(client: TestClient) -> None:
    student = _register(client, "asha@example.com")
    token = _token(client, "asha@example.com")
    app = client.app
    registry = app.state.connection_registry
    dispatcher = app.state.event_dispatcher

    async def scenario() -> tuple[list[dict], int]:
        stream = _EventStream(app, token).start()
        received = [await stream.next_payload()]
        assert stream.status == 200
        assert registry.count() == 1
        assert registry.find_by_user(student["id"])[0].role is UserRole.STUDENT
        # The authentication session is closed before frames flow.
        checked_out = engine.pool.checkedout()

        dispatcher.send_to_user(student["id"], _ping(1))
        dispatcher.send_to_user(student["id"], _ping(2))
        received.append(await stream.next_payload())
        received.append(await stream.next_payload())
        await stream.close()
        assert stream.headers[b"content-type"].startswith(b"text/event-stream")
        assert stream.headers[b"cache-control"] == b"no-cache"
        assert stream.headers[b"x-accel-buffering"] == b"no"
        assert b"connection" not in stream.headers
        return received, checked_out

    received, checked_out = asyncio.run(scenario())

    assert received[0] == {"connected": True}
    assert [p["id"] for p in received[1:]] == [1, 2]
    assert checked_out == 0
    assert registry.count() == 0


def test_many_open_streams_do_not_starve_requests(client: TestClient) -> None:
    _register(client, "asha@example.com")
    token = _token(client, "asha@example.com")
    app = client.app

    async def scenario() -> int:
        streams = [_EventStream(app, token).start() for _ in range(20)]
        for stream in streams:
            assert await stream.next_payload() == {"connected": True}
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://testserver"
        ) as http:
            response = await asyncio.wait_for(
                http.get("/users/me", headers={"Authorization": f"Bearer {token}"}),
                timeout=5,
            )
        for stream in streams:
            await stream.close()
        return response.status_code

    assert asyncio.run(scenario()) == 200
    assert app.state.connection_registry.count() == 0


def test_promoted_user_gets_admin_events_only_after_reconnecting(client: TestClient) -> None:
    asha = _register(client, "asha@example.com")
    _register(client, "ravi@example.com", first_name="Ravi")
    asha_token = _token(client, "asha@example.com")
    ravi_token = _token(client, "ravi@example.com")
    app = client.app
    registry = app.state.connection_registry
    dispatcher = app.state.event_dispatcher

    async def scenario() -> None:
        student_era = _EventStream(app, asha_token).start()
        assert await student_era.next_payload() == {"connected": True}

        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://testserver"
        ) as http:
            promoted = await http.patch(
                f"/users/{asha['id']}/role",
                json={"role": "admin"},
                headers={"Authorization": f"Bearer {asha_token}"},
            )
            assert promoted.status_code == 200
            assert registry.find_by_role(UserRole.ADMIN) == []

            reconnected = _EventStream(app, asha_token).start()
            assert await reconnected.next_payload() == {"connected": True}

            created = await http.post(
                "/leaves",
                json=_leave_payload(),
                headers={"Authorization": f"Bearer {ravi_token}"},
            )
            assert created.status_code == 201

        admin_event = await reconnected.next_payload()
        assert admin_event["title"] == "New Leave Request"

        # Both streams belong to asha; the student-era one skipped the admin event.
        dispatcher.send_to_user(asha["id"], _ping(99))
        assert (await student_era.next_payload())["id"] == 99
        assert (await reconnected.next_payload())["id"] == 99
        assert not student_era.has_pending()

        await student_era.close()
        await reconnected.close()

    asyncio.run(scenario())

    assert registry.count() == 0
