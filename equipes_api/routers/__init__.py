"""
FastAPI routers.

Each module exposes an APIRouter included by the application factory
(equipes_api.app.create_app).
"""
