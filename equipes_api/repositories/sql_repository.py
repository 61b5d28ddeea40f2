"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import delete
from sqlalchemy.dialects import postgresql, sqlite

from equipes_api.db.models import Account, UserDocument
from equipes_api.db.session import Database

# Dialects with a native INSERT ... ON CONFLICT statement.
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def _upsert_insert(self):
        return _UPSERT_INSERTS.get(self.database.dialect)

    # -------------------------- accounts --------------------------
    def get_account(self, username: str) -> Optional[Account]:
        with self.database.session() as session:
            return session.get(Account, username)

    def create_account(self, username: str, password_hash: str) -> Account:
        """Insert a new account; raises IntegrityError when the username exists."""
        entity = Account(
            username=username,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )
        with self.database.session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def ensure_account(self, username: str, password_hash: str) -> bool:
        """Insert the account if missing. Returns True when a row was created."""
        insert = self._upsert_insert()
        with self.database.session() as session:
            if insert is not None:
                stmt = (
                    insert(Account)
                    .values(
                        username=username,
                        password_hash=password_hash,
                        created_at=datetime.now(timezone.utc),
                    )
                    .on_conflict_do_nothing(index_elements=["username"])
                )
                result = session.execute(stmt)
                session.commit()
                return result.rowcount == 1
            if session.get(Account, username) is not None:
                return False
            session.add(
                Account(
                    username=username,
                    password_hash=password_hash,
                    created_at=datetime.now(timezone.utc),
                )
            )
            session.commit()
            return True

    def delete_account(self, username: str) -> None:
        with self.database.session() as session:
            session.execute(delete(Account).where(Account.username == username))
            session.commit()

    # -------------------------- documents --------------------------
    def get_document(self, username: str) -> Optional[UserDocument]:
        with self.database.session() as session:
            return session.get(UserDocument, username)

    def upsert_document(self, username: str, personnes: Any, equipes: Any) -> None:
        """Create the document or replace both collections together."""
        now = datetime.now(timezone.utc)
        insert = self._upsert_insert()
        with self.database.session() as session:
            if insert is not None:
                stmt = insert(UserDocument).values(
                    username=username,
                    personnes=personnes,
                    equipes=equipes,
                    updated_at=now,
                )
                stmt = stmt.on_conflict_do_update(
                    index_elements=["username"],
                    set_={
                        "personnes": stmt.excluded.personnes,
                        "equipes": stmt.excluded.equipes,
                        "updated_at": stmt.excluded.updated_at,
                    },
                )
                session.execute(stmt)
                session.commit()
                return
            document = session.get(UserDocument, username)
            if not document:
                document = UserDocument(username=username, personnes=personnes, equipes=equipes, updated_at=now)
                session.add(document)
            else:
                document.personnes = personnes
                document.equipes = equipes
                document.updated_at = now
            session.commit()
