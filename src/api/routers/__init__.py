"""API routers."""

from api.routers import analysis, substances

__all__ = ["analysis", "substances"]
