"""Service aggregate: a priced, categorized offering of one tailor."""

import json
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text

from tailorhub.catalogue.service.events import (
    ServiceAdded,
    ServiceDeactivated,
    ServicePriceChanged,
)
from tailorhub.domain import tailorhub


class ServiceType(Enum):
    CUSTOM_STITCHING = "custom_stitching"
    ALTERATIONS = "alterations"
    REPAIRS = "repairs"
    UNIFORMS = "uniforms"


class GarmentType(Enum):
    SHIRT = "shirt"
    PANTS = "pants"
    SUIT = "suit"
    DRESS = "dress"
    BLOUSE = "blouse"
    LEHENGA = "lehenga"
    SAREE = "saree"
    SHERWANI = "sherwani"
    KURTA = "kurta"
    OTHER = "other"


_GARMENT_VALUES = {g.value for g in GarmentType}


@tailorhub.aggregate
class Service:
    tailor_id: Identifier(required=True)
    service_type: String(required=True, choices=ServiceType)
    garment_types: Text()  # JSON array of GarmentType values
    price: Float(required=True, min_value=0.0)
    delivery_days: Integer(default=3, min_value=1)
    description: Text()
    is_active: Boolean(default=True)

    @invariant.post
    def garment_types_must_be_known(self):
        unknown = [g for g in self.garment_type_list if g not in _GARMENT_VALUES]
        if unknown:
            raise ValidationError({"garment_types": [f"Unknown garment types: {', '.join(unknown)}"]})

    @classmethod
    def offer(cls, tailor_id, service_type, price, garment_types=None, delivery_days=3, description=None):
        service = cls(
            tailor_id=tailor_id,
            service_type=service_type,
            garment_types=json.dumps(sorted(set(garment_types or []))),
            price=price,
            delivery_days=delivery_days or 3,
            description=description,
            is_active=True,
        )
        service.raise_(
            ServiceAdded(
                service_id=str(service.id),
                tailor_id=str(tailor_id),
                service_type=service_type,
                price=price,
            )
        )
        return service

    @property
    def garment_type_list(self) -> list[str]:
        return json.loads(self.garment_types) if self.garment_types else []

    def covers_garment(self, garment_type) -> bool:
        """An empty garment set means the service takes any garment."""
        garments = self.garment_type_list
        return not garments or garment_type in garments

    def change_price(self, new_price):
        if not self.is_active:
            raise ValidationError({"is_active": ["Cannot reprice an inactive service"]})

        old_price = self.price
        self.price = new_price
        self.raise_(
            ServicePriceChanged(
                service_id=str(self.id),
                old_price=old_price,
                new_price=new_price,
            )
        )

    def deactivate(self):
        if not self.is_active:
            raise ValidationError({"is_active": ["Service is already inactive"]})

        self.is_active = False
        self.raise_(ServiceDeactivated(service_id=str(self.id), tailor_id=str(self.tailor_id)))
