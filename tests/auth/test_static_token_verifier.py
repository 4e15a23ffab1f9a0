import pytest

from src.workforce_system.workforce_system.auth.verifier import Principal, StaticTokenVerifier
from src.workforce_system.workforce_system.core.enums import Role
from src.workforce_system.workforce_system.core.exceptions import AuthenticationError


def test_parses_tokens_roles_and_subjects():
    verifier = StaticTokenVerifier.from_setting("a1:ADMIN:alice, u1:user")

    assert verifier.verify("a1") == Principal(subject="alice", role=Role.ADMIN)
    assert verifier.verify("u1") == Principal(subject="user", role=Role.USER)


def test_unknown_token_rejected():
    verifier = StaticTokenVerifier.from_setting("a1:ADMIN")
    with pytest.raises(AuthenticationError):
        verifier.verify("nope")


def test_empty_setting_accepts_nothing():
    with pytest.raises(AuthenticationError):
        StaticTokenVerifier.from_setting("").verify("")


def test_malformed_entry_raises():
    with pytest.raises(ValueError):
        StaticTokenVerifier.from_setting("just-a-token")
