from datetime import timedelta

import pytest

from app.models.base.enums import UserRole
from app.services.common.security import (
    JWTSettings,
    TokenDecodeError,
    TokenExpiredError,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)

JWT = JWTSettings(secret_key="unit-test-secret", access_token_expires_minutes=5)


def test_password_round_trip():
    hashed = hash_password("s3cret-pass")
    assert hashed != "s3cret-pass"
    assert verify_password("s3cret-pass", hashed)
    assert not verify_password("wrong", hashed)


def test_long_passwords_use_every_byte():
    base = "x" * 80
    hashed = hash_password(base + "a")
    assert verify_password(base + "a", hashed)
    assert not verify_password(base + "b", hashed)


def test_verify_rejects_garbage_hash():
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_token_carries_identity():
    token = create_access_token(subject="user-1", email="a@b.c", role=UserRole.WARDEN, jwt_settings=JWT)
    payload = decode_token(token, JWT)
    assert payload["sub"] == "user-1"
    assert payload["role"] == "warden"
    assert payload["type"] == "access"


def test_expired_token():
    token = create_access_token(
        subject="user-1",
        email="a@b.c",
        role=UserRole.STUDENT,
        jwt_settings=JWT,
        expires_delta=timedelta(seconds=-1),
    )
    with pytest.raises(TokenExpiredError):
        decode_token(token, JWT)


def test_token_signed_with_other_key():
    other = JWTSettings(secret_key="another-secret")
    token = create_access_token(subject="user-1", email="a@b.c", role=UserRole.ADMIN, jwt_settings=other)
    with pytest.raises(TokenDecodeError):
        decode_token(token, JWT)


def test_empty_secret_rejected():
    with pytest.raises(ValueError):
        JWTSettings(secret_key="")
