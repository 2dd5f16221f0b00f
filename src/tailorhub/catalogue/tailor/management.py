"""Tailor profile management: commands and handlers."""

import json

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from tailorhub.catalogue.tailor.tailor import Tailor
from tailorhub.domain import tailorhub
from tailorhub.utils.logging import get_logger

logger = get_logger(__name__)


@tailorhub.command(part_of="Tailor")
class UpdateTailorProfile:
    """Partial update: only fields present in the command change."""

    user_id: Identifier(required=True)
    business_name: String(max_length=200)
    location: String(max_length=200)
    address: Text()
    specializations: Text()  # JSON array
    description: Text()
    avg_delivery_days: Integer(min_value=1)
    starting_price: Float(min_value=0.0)


@tailorhub.command(part_of="Tailor")
class VerifyTailor:
    tailor_id: Identifier(required=True)


@tailorhub.command_handler(part_of=Tailor)
class ManageTailorHandler:
    @handle(UpdateTailorProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(Tailor)
        tailor = repo.find_by_user_id(command.user_id)
        if tailor is None:
            raise ObjectNotFoundError(f"No tailor profile for user {command.user_id}")

        changes = {
            name: getattr(command, name)
            for name in (
                "business_name",
                "location",
                "address",
                "description",
                "avg_delivery_days",
                "starting_price",
            )
            if getattr(command, name) is not None
        }
        if command.specializations is not None:
            changes["specializations"] = json.loads(command.specializations)

        tailor.update_profile(**changes)
        repo.add(tailor)
        return str(tailor.id)

    @handle(VerifyTailor)
    def verify_tailor(self, command):
        repo = current_domain.repository_for(Tailor)
        tailor = repo.get(command.tailor_id)
        tailor.verify()
        repo.add(tailor)
        logger.info("tailor_verified", tailor_id=str(tailor.id))
