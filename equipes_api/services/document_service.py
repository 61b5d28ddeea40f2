"""Document use cases: whole-document upsert on save, defaults on load."""

from __future__ import annotations

import logging
from typing import Any

from equipes_api.repositories.sql_repository import SQLRepository
from equipes_api.services.account_service import AccountService
from equipes_api.services.errors import AuthError, ValidationError

logger = logging.getLogger(__name__)

MISSING = object()
"""Marks a collection absent from the request, as opposed to ``None`` or ``[]``."""

MISSING_DATA = "Nom d'utilisateur et données (personnes, equipes) requis."
MISSING_USERNAME = "Nom d'utilisateur requis."
UNKNOWN_ACCOUNT = "Utilisateur inconnu. Inscription requise."


class DocumentService:
    """Stores one (personnes, equipes) pair per username."""

    def __init__(self, repository: SQLRepository, accounts: AccountService, *, save_mode: str = "open") -> None:
        self.repository = repository
        self.accounts = accounts
        self.save_mode = save_mode

    def save(self, username: str | None, personnes: Any = MISSING, equipes: Any = MISSING) -> None:
        if not username or personnes is MISSING or equipes is MISSING:
            raise ValidationError(MISSING_DATA)
        logger.debug(
            "saveData for %s: personnes=%s equipes=%s",
            username,
            type(personnes).__name__,
            type(equipes).__name__,
        )
        if self.save_mode == "registered":
            if not self.accounts.exists(username):
                raise AuthError(UNKNOWN_ACCOUNT)
        else:
            self.accounts.ensure_account(username)
        self.repository.upsert_document(username, personnes, equipes)

    def load(self, username: str | None) -> dict:
        if not username:
            raise ValidationError(MISSING_USERNAME)
        document = self.repository.get_document(username)
        if document is None:
            return {"personnes": [], "equipes": []}
        return {
            "personnes": document.personnes if document.personnes is not None else [],
            "equipes": document.equipes if document.equipes is not None else [],
        }
