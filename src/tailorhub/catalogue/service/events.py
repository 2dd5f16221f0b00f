"""Domain events for the Service aggregate."""

from protean.fields import Float, Identifier, String

from tailorhub.domain import tailorhub


@tailorhub.event(part_of="Service")
class ServiceAdded:
    __version__ = 1

    service_id: Identifier(required=True)
    tailor_id: Identifier(required=True)
    service_type: String(required=True)
    price: Float(required=True)


@tailorhub.event(part_of="Service")
class ServicePriceChanged:
    """Only orders placed after this event see the new price."""

    __version__ = 1

    service_id: Identifier(required=True)
    old_price: Float(required=True)
    new_price: Float(required=True)


@tailorhub.event(part_of="Service")
class ServiceDeactivated:
    __version__ = 1

    service_id: Identifier(required=True)
    tailor_id: Identifier(required=True)
