"""Repository for the Tailor aggregate."""

from protean.exceptions import ObjectNotFoundError

from tailorhub.catalogue.tailor.tailor import Tailor
from tailorhub.domain import tailorhub


@tailorhub.repository(part_of=Tailor)
class TailorRepository:
    def find(self, tailor_id) -> Tailor | None:
        if not tailor_id:
            return None
        try:
            return self.get(str(tailor_id))
        except ObjectNotFoundError:
            return None

    def find_by_user_id(self, user_id) -> Tailor | None:
        tailors = self._dao.query.filter(user_id=str(user_id)).all().items
        return tailors[0] if tailors else None

    def find_verified(self) -> list[Tailor]:
        return self._dao.query.filter(is_verified=True).limit(None).all().items
