from uuid import uuid4

from jose import jwt

from config import ApplicationConfig
from src.api.utils.jwt import (
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    generate_access_token,
    generate_refresh_token,
    issue_tokens,
    verify_jwt,
)


def test_access_token_claims():
    user_id, role_id = uuid4(), uuid4()

    payload = verify_jwt(generate_access_token(user_id, role_id))

    assert payload["user_id"] == str(user_id)
    assert payload["role_id"] == str(role_id)
    assert payload["type"] == ACCESS_TOKEN_TYPE
    assert payload["exp"] - payload["iat"] == ApplicationConfig.JWT_EXPIRES_MINUTES * 60


def test_refresh_token_claims():
    user_id = uuid4()

    payload = verify_jwt(generate_refresh_token(user_id), REFRESH_TOKEN_TYPE)

    assert payload["user_id"] == str(user_id)
    assert payload["type"] == REFRESH_TOKEN_TYPE
    assert "role_id" not in payload
    assert payload["exp"] - payload["iat"] == (
        ApplicationConfig.JWT_REFRESH_EXPIRES_DAYS * 24 * 3600
    )


def test_tokens_do_not_cross_verify():
    access, refresh = issue_tokens(uuid4(), uuid4())

    assert verify_jwt(access, REFRESH_TOKEN_TYPE) is None
    assert verify_jwt(refresh, ACCESS_TOKEN_TYPE) is None


def test_refresh_tokens_issued_together_differ():
    user_id = uuid4()

    assert generate_refresh_token(user_id) != generate_refresh_token(user_id)


def test_type_claim_must_match():
    """Correct secret but wrong type claim is rejected"""
    token = jwt.encode(
        {"user_id": str(uuid4()), "type": REFRESH_TOKEN_TYPE},
        ApplicationConfig.JWT_SECRET,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
    )

    assert verify_jwt(token, ACCESS_TOKEN_TYPE) is None


def test_malformed_token():
    assert verify_jwt("not-a-jwt") is None
    assert verify_jwt("", REFRESH_TOKEN_TYPE) is None
