"""TailorHub domain: a marketplace for tailoring services.

A single bounded context groups the identity records, the tailor catalogue,
the order lifecycle, reviews with rating aggregation, and the booking
workflow. They share one domain so that order views can join users,
tailors, services and reviews inside one repository layer.
"""

from protean.domain import Domain

from tailorhub.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
tailorhub = Domain(name="tailorhub")
