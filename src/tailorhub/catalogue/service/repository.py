"""Repository for the Service aggregate."""

from protean.exceptions import ObjectNotFoundError

from tailorhub.catalogue.service.service import Service
from tailorhub.domain import tailorhub


@tailorhub.repository(part_of=Service)
class ServiceRepository:
    def find(self, service_id) -> Service | None:
        if not service_id:
            return None
        try:
            return self.get(str(service_id))
        except ObjectNotFoundError:
            return None

    def find_active_by_tailor(self, tailor_id) -> list[Service]:
        return self._dao.query.filter(tailor_id=str(tailor_id), is_active=True).limit(None).all().items

    def find_active_by_type(self, service_type) -> list[Service]:
        return self._dao.query.filter(service_type=service_type, is_active=True).limit(None).all().items
