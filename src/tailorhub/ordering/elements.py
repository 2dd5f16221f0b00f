"""Ordering elements nested below the component folder, loaded at domain init."""

from tailorhub.ordering.order import (  # noqa: F401
    creation,
    delivery,
    events,
    order,
    payment,
    repository,
    status,
)
