"""Catalogue API package."""

from tailorhub.catalogue.api.routes import service_router, tailor_router

__all__ = ["tailor_router", "service_router"]
