"""User registration: command and handler.

A tailor-role registration also creates the tailor's catalogue profile. Both
aggregates are added inside the handler's unit of work, so either both
records exist afterwards or neither does.
"""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String, Text
from protean.utils.globals import current_domain

from tailorhub.catalogue.tailor.tailor import Tailor
from tailorhub.domain import tailorhub
from tailorhub.identity.user.user import User, UserRole
from tailorhub.utils.logging import get_logger

logger = get_logger(__name__)


@tailorhub.command(part_of="User")
class RegisterUser:
    """Create an account; tailor-role accounts carry their profile fields."""

    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)
    name: String(required=True, max_length=200)
    phone: String(max_length=20)
    role: String(choices=UserRole, default=UserRole.CUSTOMER.value)

    # Tailor profile fields, ignored for customers
    business_name: String(max_length=200)
    location: String(max_length=200)
    address: Text()
    specializations: Text()  # JSON array of tags
    description: Text()
    avg_delivery_days: Integer(min_value=1)
    starting_price: Float(min_value=0.0)


@tailorhub.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        user_repo = current_domain.repository_for(User)
        if user_repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["User already exists"]})

        user = User.register(
            email=command.email,
            password=command.password,
            name=command.name,
            phone=command.phone,
            role=command.role,
        )

        tailor = None
        if user.is_tailor:
            if not command.location or not command.location.strip():
                raise ValidationError({"location": ["Location is required for tailors"]})

            tailor = Tailor.create_profile(
                user_id=str(user.id),
                location=command.location,
                business_name=command.business_name,
                address=command.address,
                specializations=json.loads(command.specializations) if command.specializations else [],
                description=command.description,
                avg_delivery_days=command.avg_delivery_days,
                starting_price=command.starting_price,
            )

        user_repo.add(user)
        if tailor is not None:
            current_domain.repository_for(Tailor).add(tailor)

        logger.info("user_registered", user_id=str(user.id), role=user.role)
        return str(user.id)
