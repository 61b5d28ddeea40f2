"""
Account use cases: registration, credential checks and the ensure-account
step used by the document save path.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from equipes_api.core.security import hash_password, reject_unknown_user, verify_password
from equipes_api.repositories.sql_repository import SQLRepository
from equipes_api.services.errors import AuthError, ConflictError, ValidationError

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = "Nom d'utilisateur et mot de passe requis."
USERNAME_TAKEN = "Nom d'utilisateur déjà pris."
BAD_CREDENTIALS = "Nom d'utilisateur ou mot de passe incorrect."


class AccountService:
    """Maps usernames to hashed credentials and enforces uniqueness."""

    def __init__(self, repository: SQLRepository, *, placeholder_credential: str) -> None:
        self.repository = repository
        self.placeholder_credential = placeholder_credential

    def _require(self, username: str | None, password: str | None) -> None:
        if not username or not password:
            raise ValidationError(MISSING_CREDENTIALS)

    def exists(self, username: str) -> bool:
        return self.repository.get_account(username) is not None

    def register(self, username: str | None, password: str | None) -> None:
        self._require(username, password)
        if self.exists(username):
            raise ConflictError(USERNAME_TAKEN)
        try:
            self.repository.create_account(username, hash_password(password))
        except IntegrityError as exc:
            # A concurrent register committed first.
            raise ConflictError(USERNAME_TAKEN) from exc
        logger.info("Registered account %s", username)

    def verify(self, username: str | None, password: str | None) -> None:
        self._require(username, password)
        account = self.repository.get_account(username)
        if account is None:
            authenticated = reject_unknown_user(password)
        else:
            authenticated = verify_password(password, account.password_hash)
        if not authenticated:
            raise AuthError(BAD_CREDENTIALS)

    def ensure_account(self, username: str) -> bool:
        """
        Create a placeholder account holding the sentinel credential when none
        exists, so a document can be saved without a prior registration.

        This keeps the foreign key satisfied in the authentication-optional
        deployment mode; it does not protect anything.
        """
        if self.exists(username):
            return False
        created = self.repository.ensure_account(username, hash_password(self.placeholder_credential))
        if created:
            logger.info("Created placeholder account %s", username)
        return created
