import uuid
from datetime import timedelta

import jwt
import pytest

from finance_tracker.schemas.auth import UserPrincipal
from finance_tracker.services.providers.password_encoder import BcryptPasswordEncoder
from finance_tracker.services.providers.token_provider import JwtTokenProvider
from finance_tracker.settings.app import AppSettings

SECRET = "unit-test-secret-key-that-is-long-enough"


def make_provider(**overrides) -> JwtTokenProvider:
    return JwtTokenProvider(AppSettings(jwt_secret=SECRET, **overrides))


def test_bcrypt_hash_and_verify():
    encoder = BcryptPasswordEncoder()
    hashed = encoder.hash_password("nick123")

    assert hashed != "nick123"
    assert encoder.verify("nick123", hashed)
    assert not encoder.verify("wrong", hashed)


def test_bcrypt_verify_rejects_malformed_hash():
    assert not BcryptPasswordEncoder().verify("nick123", "not-a-bcrypt-hash")


def test_token_contains_user_and_expiry():
    provider = make_provider()
    user_id = uuid.uuid4()

    token = provider.encode_token(UserPrincipal(user_id=user_id))
    payload = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert payload["user_id"] == str(user_id)
    assert "exp" in payload
    assert provider.decode_token(token).user_id == user_id


def test_expired_token_is_rejected():
    provider = make_provider(jwt_expires_in=timedelta(seconds=-10))
    token = provider.encode_token(UserPrincipal(user_id=uuid.uuid4()))

    with pytest.raises(jwt.ExpiredSignatureError):
        provider.decode_token(token)


def test_token_signed_with_another_secret_is_rejected():
    foreign = JwtTokenProvider(AppSettings(jwt_secret="another-secret-key-that-is-long-enough"))
    token = foreign.encode_token(UserPrincipal(user_id=uuid.uuid4()))

    with pytest.raises(jwt.InvalidSignatureError):
        make_provider().decode_token(token)
