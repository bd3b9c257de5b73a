"""Tests for account creation and password authentication."""

from __future__ import annotations

import pytest

from sporthive.application.use_cases.users import authenticate_user, create_user
from sporthive.domain.entities import PermissionLevel
from sporthive.domain.exceptions import ConflictError


def test_create_user_hashes_password_and_defaults_to_standard(session) -> None:
    user = create_user(session, name="Ana", email="ana@example.com", password="pa55word")

    assert user.permission is PermissionLevel.STANDARD
    assert user.password_hash != "pa55word"
    assert authenticate_user(session, "ana@example.com", "pa55word") == user
    assert authenticate_user(session, "ana@example.com", "wrong") is None
    assert authenticate_user(session, "nobody@example.com", "pa55word") is None


def test_create_user_rejects_duplicate_email(session) -> None:
    create_user(session, name="Ana", email="ana@example.com", password="one")

    with pytest.raises(ConflictError):
        create_user(session, name="Other", email="ana@example.com", password="two")


def test_banned_user_can_still_sign_in(session) -> None:
    create_user(
        session,
        name="Banned",
        email="banned@example.com",
        password="secret",
        permission=PermissionLevel.BANNED,
    )

    user = authenticate_user(session, "banned@example.com", "secret")

    assert user is not None
    assert user.permission is PermissionLevel.BANNED
