from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from equipes_api.core import security
from equipes_api.services.account_service import AccountService
from equipes_api.services.errors import AuthError, ConflictError, ValidationError


@pytest.fixture()
def accounts(repo):
    return AccountService(repo, placeholder_credential="no_password_needed")


def test_register_then_verify(accounts, repo):
    accounts.register("alice", "s3cret")

    accounts.verify("alice", "s3cret")
    assert repo.get_account("alice").password_hash != "s3cret"


def test_register_twice_conflicts(accounts):
    accounts.register("alice", "one")
    with pytest.raises(ConflictError):
        accounts.register("alice", "two")
    accounts.verify("alice", "one")


@pytest.mark.parametrize("username,password", [("", "pw"), ("alice", ""), (None, "pw"), ("alice", None)])
def test_missing_fields_are_rejected(accounts, username, password):
    with pytest.raises(ValidationError):
        accounts.register(username, password)
    with pytest.raises(ValidationError):
        accounts.verify(username, password)


def test_unknown_user_and_wrong_password_look_the_same(accounts):
    accounts.register("alice", "s3cret")

    with pytest.raises(AuthError) as unknown:
        accounts.verify("bob", "s3cret")
    with pytest.raises(AuthError) as wrong:
        accounts.verify("alice", "nope")

    assert unknown.value.message == wrong.value.message
    assert unknown.value.status_code == wrong.value.status_code == 401


def test_legacy_plaintext_rows_still_verify(accounts, repo):
    repo.create_account("legacy", password_hash="plain")
    accounts.verify("legacy", "plain")
    with pytest.raises(AuthError):
        accounts.verify("legacy", "Plain")


def test_ensure_account_uses_sentinel_credential(accounts):
    assert accounts.ensure_account("carol") is True
    assert accounts.ensure_account("carol") is False
    accounts.verify("carol", "no_password_needed")


def test_ensure_account_keeps_registered_credential(accounts):
    accounts.register("alice", "s3cret")
    assert accounts.ensure_account("alice") is False
    accounts.verify("alice", "s3cret")


def test_unknown_user_and_wrong_password_both_run_argon2(accounts, monkeypatch):
    accounts.register("alice", "s3cret")
    calls = []
    real_hasher = security._ph

    class CountingHasher:
        def verify(self, hashed, password):
            calls.append(password)
            return real_hasher.verify(hashed, password)

    monkeypatch.setattr(security, "_ph", CountingHasher())

    with pytest.raises(AuthError):
        accounts.verify("bob", "s3cret")
    with pytest.raises(AuthError):
        accounts.verify("alice", "nope")

    assert calls == ["s3cret", "nope"]


def test_register_race_reports_conflict(accounts, repo, monkeypatch):
    def lost_race(username, password_hash):
        raise IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.username"))

    monkeypatch.setattr(repo, "create_account", lost_race)

    with pytest.raises(ConflictError):
        accounts.register("alice", "s3cret")
