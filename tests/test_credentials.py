import uuid
from datetime import timedelta

import jwt
import pytest

from konektz.domain.exceptions import ExpiredTokenError, InvalidTokenError
from konektz.domain.value_objects import UserEmail, UserId
from konektz.infrastructure.security import JwtCredentialVerifier
from konektz.infrastructure.security.jwt_credential_verifier import translate_token_error
from jwt_generation import TEST_JWT_SECRET, generate_jwt_token


@pytest.fixture()
def verifier():
    return JwtCredentialVerifier(TEST_JWT_SECRET)


def test_password_hash_round_trip(verifier):
    password_hash = verifier.hash_password("pw1")
    assert password_hash != "pw1"
    assert verifier.verify_password("pw1", password_hash)
    assert not verifier.verify_password("pw2", password_hash)


def test_malformed_hash_does_not_raise(verifier):
    assert verifier.verify_password("pw1", "not-a-hash") is False
    assert verifier.verify_password("pw1", "") is False


def test_issued_token_claims(verifier):
    user_id = UserId.generate()
    token = verifier.issue_token(user_id, UserEmail("alice@x.com"))

    claims = verifier.verify_token(token)
    assert claims.id == user_id
    assert claims.email == UserEmail("alice@x.com")

    payload = jwt.decode(token, TEST_JWT_SECRET, algorithms=["HS256"])
    assert set(payload) == {"id", "email", "iat", "exp"}
    assert payload["exp"] - payload["iat"] == int(timedelta(days=7).total_seconds())


def test_expired_token(verifier):
    token = generate_jwt_token(str(uuid.uuid4()), expires_in=timedelta(minutes=-1))
    with pytest.raises(ExpiredTokenError):
        verifier.verify_token(token)


def test_wrong_secret(verifier):
    token = generate_jwt_token(str(uuid.uuid4()), secret="another-secret")
    with pytest.raises(InvalidTokenError):
        verifier.verify_token(token)


def test_missing_claims(verifier):
    token = jwt.encode({"id": str(uuid.uuid4())}, TEST_JWT_SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        verifier.verify_token(token)


def test_non_uuid_id_claim(verifier):
    with pytest.raises(InvalidTokenError):
        verifier.verify_token(generate_jwt_token("17"))


def test_translate_token_error():
    assert isinstance(translate_token_error(jwt.ExpiredSignatureError()), ExpiredTokenError)
    assert isinstance(translate_token_error(jwt.DecodeError()), InvalidTokenError)


def test_secret_is_required():
    with pytest.raises(ValueError):
        JwtCredentialVerifier("")
