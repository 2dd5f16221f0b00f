"""Service management: commands and handlers.

Every command carries the acting user's id; only the owning tailor may
touch a service.
"""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from tailorhub.catalogue.service.service import Service, ServiceType
from tailorhub.catalogue.tailor.tailor import Tailor
from tailorhub.domain import tailorhub


@tailorhub.command(part_of="Service")
class AddService:
    user_id: Identifier(required=True)
    service_type: String(required=True, choices=ServiceType)
    price: Float(required=True, min_value=0.0)
    garment_types: Text()  # JSON array
    delivery_days: Integer(min_value=1)
    description: Text()


@tailorhub.command(part_of="Service")
class UpdateServicePrice:
    user_id: Identifier(required=True)
    service_id: Identifier(required=True)
    price: Float(required=True, min_value=0.0)


@tailorhub.command(part_of="Service")
class DeactivateService:
    user_id: Identifier(required=True)
    service_id: Identifier(required=True)


def _tailor_for_user(user_id) -> Tailor:
    tailor = current_domain.repository_for(Tailor).find_by_user_id(user_id)
    if tailor is None:
        raise ValidationError({"user_id": ["Only tailors can manage services"]})
    return tailor


def _owned_service(user_id, service_id) -> Service:
    tailor = _tailor_for_user(user_id)
    service = current_domain.repository_for(Service).get(service_id)
    if str(service.tailor_id) != str(tailor.id):
        raise ValidationError({"service_id": ["Service does not belong to this tailor"]})
    return service


@tailorhub.command_handler(part_of=Service)
class ManageServiceHandler:
    @handle(AddService)
    def add_service(self, command):
        tailor = _tailor_for_user(command.user_id)

        service = Service.offer(
            tailor_id=str(tailor.id),
            service_type=command.service_type,
            price=command.price,
            garment_types=json.loads(command.garment_types) if command.garment_types else [],
            delivery_days=command.delivery_days,
            description=command.description,
        )
        current_domain.repository_for(Service).add(service)
        return str(service.id)

    @handle(UpdateServicePrice)
    def update_service_price(self, command):
        service = _owned_service(command.user_id, command.service_id)
        service.change_price(command.price)
        current_domain.repository_for(Service).add(service)

    @handle(DeactivateService)
    def deactivate_service(self, command):
        service = _owned_service(command.user_id, command.service_id)
        service.deactivate()
        current_domain.repository_for(Service).add(service)
