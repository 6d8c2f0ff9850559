# tests/test_security.py

import base64
import hashlib

from hrms.core.security import (
    compute_hash,
    extract_session_token,
    generate_salt,
    generate_session_token,
    hash_password,
    verify_password,
)


def test_compute_hash_is_base64_sha256_of_password_and_salt():
    expected = base64.b64encode(hashlib.sha256(b"Secret1!c2FsdA==").digest()).decode()
    assert compute_hash("Secret1!", "c2FsdA==") == expected


def test_salt_and_token_sizes():
    assert len(base64.b64decode(generate_salt())) == 32
    assert len(base64.b64decode(generate_session_token())) == 64


def test_tokens_are_unique():
    tokens = {generate_session_token() for _ in range(50)}
    assert len(tokens) == 50


def test_hash_password_uses_fresh_salt():
    first_hash, first_salt = hash_password("Admin123!")
    second_hash, second_salt = hash_password("Admin123!")

    assert first_salt != second_salt
    assert first_hash != second_hash
    assert first_hash == compute_hash("Admin123!", first_salt)


def test_verify_password():
    password_hash, salt = hash_password("Admin123!")

    assert verify_password("Admin123!", password_hash, salt) is True
    assert verify_password("admin123!", password_hash, salt) is False
    assert verify_password("Admin123!", password_hash, generate_salt()) is False


def test_verify_password_rejects_missing_hash():
    assert verify_password("anything", "", "salt") is False


def test_bearer_header_takes_precedence():
    assert extract_session_token("Bearer abc", "xyz") == "abc"


def test_falls_back_to_session_token_header():
    assert extract_session_token(None, "xyz") == "xyz"
    assert extract_session_token("Basic dXNlcjpwYXNz", "xyz") == "xyz"


def test_empty_bearer_does_not_fall_back():
    assert extract_session_token("Bearer ", "xyz") is None
    assert extract_session_token("Bearer   ", "xyz") is None


def test_no_token():
    assert extract_session_token(None, None) is None
    assert extract_session_token("Basic dXNlcjpwYXNz") is None
    assert extract_session_token("", "  ") is None
