"""Storage backend for per-user "personnes" and "equipes" JSON collections."""

__version__ = "0.1.0"
