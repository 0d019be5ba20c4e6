from datetime import timedelta

from jose import jwt as jose_jwt

from torqr.security_utils import (
    create_access_token,
    hash_password,
    verify_access_token,
    verify_password,
)


def test_password_hash_roundtrip():
    hashed = hash_password("Secret123!")
    assert hashed != "Secret123!"
    assert verify_password("Secret123!", hashed)
    assert not verify_password("wrong-password", hashed)


def test_verify_password_with_malformed_hash_returns_false():
    assert verify_password("Secret123!", "not-a-bcrypt-hash") is False


def test_access_token_carries_subject_and_claims():
    token = create_access_token("user-1", {"email": "a@b.de", "name": "Anna"})
    payload = verify_access_token(token)
    assert payload["sub"] == "user-1"
    assert payload["email"] == "a@b.de"
    assert "exp" in payload


def test_expired_token_is_rejected():
    token = create_access_token("user-1", expires_delta=timedelta(seconds=-10))
    assert verify_access_token(token) is None


def test_token_signed_with_another_key_is_rejected():
    forged = jose_jwt.encode({"sub": "user-1"}, "another-key", algorithm="HS256")
    assert verify_access_token(forged) is None
    assert verify_access_token("garbage") is None
