"""
Unit tests for password hashing and JWT helpers.
"""

import pytest
from jose import jwt

from blich_cms.core.errors import AuthenticationError
from blich_cms.core.security import create_access_token, decode_access_token, hash_password, verify_password

SECRET = "unit-test-secret"


class TestPasswords:
    def test_hash_and_verify(self):
        password_hash = hash_password("hunter2-hunter2")

        assert password_hash != "hunter2-hunter2"
        assert verify_password("hunter2-hunter2", password_hash)
        assert not verify_password("wrong", password_hash)

    def test_malformed_hash_does_not_verify(self):
        assert not verify_password("anything", "not-a-hash")


class TestTokens:
    def test_round_trip_with_extra_claims(self):
        token = create_access_token("42", secret=SECRET, extra_claims={"username": "admin@blich.studio"})

        claims = decode_access_token(token, secret=SECRET)

        assert claims["sub"] == "42"
        assert claims["username"] == "admin@blich.studio"
        assert claims["exp"] > claims["iat"]

    def test_wrong_secret(self):
        token = create_access_token("42", secret=SECRET)

        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token(token, secret="other-secret")

    def test_expired(self):
        token = create_access_token("42", secret=SECRET, expires_minutes=-1)

        with pytest.raises(AuthenticationError, match="Token expired"):
            decode_access_token(token, secret=SECRET)

    def test_missing(self):
        with pytest.raises(AuthenticationError, match="Missing bearer token"):
            decode_access_token("", secret=SECRET)

    def test_subject_is_required(self):
        token = jwt.encode({"username": "x"}, SECRET, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token(token, secret=SECRET)
