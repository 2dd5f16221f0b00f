"""Reviews API package."""

from tailorhub.reviews.api.routes import review_router

__all__ = ["review_router"]
