from __future__ import annotations

from fastapi import APIRouter, Request

from equipes_api.schemas import CredentialsIn, SaveDataIn
from equipes_api.services.account_service import AccountService
from equipes_api.services.document_service import MISSING, DocumentService
from equipes_api.services.errors import store_errors

router = APIRouter(prefix="/api", tags=["data"])


def _get_account_service(request: Request) -> AccountService:
    svc = getattr(getattr(request.app, "state", None), "account_service", None)
    if not svc:
        raise RuntimeError("AccountService non configuré")
    return svc


def _get_document_service(request: Request) -> DocumentService:
    svc = getattr(getattr(request.app, "state", None), "document_service", None)
    if not svc:
        raise RuntimeError("DocumentService non configuré")
    return svc


@router.post("/register", status_code=201)
def register(payload: CredentialsIn, request: Request):
    svc = _get_account_service(request)
    with store_errors("Erreur serveur lors de l'inscription."):
        svc.register(payload.username, payload.password)
    return {"message": "Inscription réussie."}


@router.post("/login")
def login(payload: CredentialsIn, request: Request):
    svc = _get_account_service(request)
    with store_errors("Erreur serveur lors de la connexion."):
        svc.verify(payload.username, payload.password)
    return {"message": "Connexion réussie."}


@router.post("/saveData")
def save_data(payload: SaveDataIn, request: Request):
    svc = _get_document_service(request)
    present = payload.model_fields_set
    personnes = payload.personnes if "personnes" in present else MISSING
    equipes = payload.equipes if "equipes" in present else MISSING
    with store_errors("Erreur serveur lors de la sauvegarde des données."):
        svc.save(payload.username, personnes, equipes)
    return {"message": "Données sauvegardées avec succès."}


@router.get("/loadData/{username}")
def load_data(username: str, request: Request):
    svc = _get_document_service(request)
    with store_errors("Erreur serveur lors du chargement des données."):
        return svc.load(username)
