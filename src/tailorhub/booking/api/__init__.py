"""Booking API package."""

from tailorhub.booking.api.routes import booking_router

__all__ = ["booking_router"]
