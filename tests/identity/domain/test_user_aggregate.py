import pytest
from protean.exceptions import ValidationError

from tailorhub.identity.user.events import UserRegistered
from tailorhub.identity.user.user import User, UserRole


class TestUserRegistration:
    def test_register_normalizes_email(self):
        user = User.register(email="  Asha@Example.COM ", password="password123", name="Asha")
        assert user.email == "asha@example.com"

    def test_register_defaults_to_customer(self):
        user = User.register(email="asha@example.com", password="password123", name="Asha")
        assert user.role == UserRole.CUSTOMER.value
        assert user.is_tailor is False

    def test_register_tailor_role(self):
        user = User.register(email="ravi@example.com", password="password123", name="Ravi", role="tailor")
        assert user.is_tailor is True

    def test_password_is_hashed(self):
        user = User.register(email="asha@example.com", password="password123", name="Asha")
        assert user.password_hash != "password123"
        assert user.check_password("password123") is True
        assert user.check_password("wrong-password") is False

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError) as exc:
            User.register(email="asha@example.com", password="short", name="Asha")
        assert "password" in exc.value.messages

    def test_malformed_email_rejected(self):
        with pytest.raises(ValidationError) as exc:
            User.register(email="not-an-email", password="password123", name="Asha")
        assert "email" in exc.value.messages

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            User.register(email="asha@example.com", password="password123", name="   ")

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            User.register(email="asha@example.com", password="password123", name="Asha", role="admin")

    def test_register_raises_event(self):
        user = User.register(email="asha@example.com", password="password123", name="Asha")
        assert len(user._events) == 1
        event = user._events[0]
        assert isinstance(event, UserRegistered)
        assert event.email == "asha@example.com"
        assert event.role == "customer"
