"""Request bodies accepted by the /api routes."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field


class CredentialsIn(BaseModel):
    username: Optional[str] = None
    # The frontend posts "password"; "credential" is accepted for newer clients.
    password: Optional[str] = Field(default=None, validation_alias=AliasChoices("password", "credential"))


class SaveDataIn(BaseModel):
    """``personnes``/``equipes`` are opaque JSON; presence is read from ``model_fields_set``."""

    username: Optional[str] = None
    personnes: Any = None
    equipes: Any = None
