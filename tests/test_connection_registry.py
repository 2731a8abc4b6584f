"""Tests for the in-memory connection registry."""

from __future__ import annotations

from itertools import chain

import pytest

from leaveflow.domain.entities import UserRole
from leaveflow.infrastructure.notifications import ConnectionRegistry

from fakes import RecordingChannel


def test_admit_returns_distinct_ids_and_counts() -> None:
    registry = ConnectionRegistry()

    first = registry.admit("u1", UserRole.STUDENT, RecordingChannel())
    second = registry.admit("u1", UserRole.STUDENT, RecordingChannel())

    assert first != second
    assert registry.count() == 2
    assert len(registry) == 2
    assert first in registry


def test_admit_retries_when_generated_id_is_taken() -> None:
    ids = chain(["dup", "dup"], (f"id{n}" for n in range(10)))
    registry = ConnectionRegistry(id_factory=lambda: next(ids))

    first = registry.admit("u1", "student", RecordingChannel())
    second = registry.admit("u2", "student", RecordingChannel())

    assert first == "dup"
    assert second == "id0"
    assert registry.get("dup").owner_user_id == "u1"


def test_remove_is_idempotent() -> None:
    registry = ConnectionRegistry()
    connection_id = registry.admit("u1", UserRole.STUDENT, RecordingChannel())

    registry.remove(connection_id)
    registry.remove(connection_id)
    registry.remove("never-admitted")

    assert registry.count() == 0
    assert registry.get(connection_id) is None


def test_find_by_user_and_role() -> None:
    registry = ConnectionRegistry()
    student_a = registry.admit("u1", UserRole.STUDENT, RecordingChannel())
    student_b = registry.admit("u1", UserRole.STUDENT, RecordingChannel())
    admin = registry.admit("a1", UserRole.ADMIN, RecordingChannel())

    assert [c.connection_id for c in registry.find_by_user("u1")] == [student_a, student_b]
    assert [c.connection_id for c in registry.find_by_role("admin")] == [admin]
    assert registry.find_by_user("nobody") == []


def test_all_preserves_admission_order() -> None:
    registry = ConnectionRegistry()
    ids = [registry.admit(f"u{n}", UserRole.STUDENT, RecordingChannel()) for n in range(5)]
    registry.remove(ids[2])

    assert [c.connection_id for c in registry.all()] == ids[:2] + ids[3:]


def test_connections_of_one_user_keep_their_own_roles() -> None:
    registry = ConnectionRegistry()
    connection_id = registry.admit("u1", UserRole.STUDENT, RecordingChannel())

    # A second stream opened after a promotion carries the new role.
    registry.admit("u1", UserRole.ADMIN, RecordingChannel())

    assert registry.get(connection_id).role is UserRole.STUDENT
    assert len(registry.find_by_role(UserRole.ADMIN)) == 1
    assert len(registry.find_by_user("u1")) == 2


def test_admit_rejects_unknown_roles() -> None:
    registry = ConnectionRegistry(id_factory=lambda: "x")

    with pytest.raises(ValueError):
        registry.admit("u1", "superuser", RecordingChannel())
    assert registry.count() == 0
