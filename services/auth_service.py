"""
Auth service - simulated sign-in for the storefront
"""
import re
from typing import Dict, Any, List, Optional

from core.constants import EVENTS, MIN_PASSWORD_LENGTH, MIN_NAME_LENGTH
from database.repository import UserRepository
from models.user import User
from .event_bus import EventBus

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_email(email: str) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


class AuthService:
    # Keeps the signed-in user in memory and in storage; no real credential check

    def __init__(self, user_repository: UserRepository, event_bus: EventBus):
        self.user_repo = user_repository
        self.event_bus = event_bus
        self.current_user: Optional[User] = self.user_repo.get_user()

    def validate_login(self, email: str, password: str) -> List[str]:
        errors = []
        if not validate_email(email):
            errors.append("Invalid email")
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return errors

    def validate_register(self, name: str, email: str, password: str) -> List[str]:
        errors = []
        if not name or len(name.strip()) < MIN_NAME_LENGTH:
            errors.append(f"Name must be at least {MIN_NAME_LENGTH} characters")
        return errors + self.validate_login(email, password)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        errors = self.validate_login(email, password)
        if errors:
            return {"success": False, "error": "Invalid credentials", "errors": errors}
        return self._sign_in(User(email=email.strip()))

    def register(self, name: str, email: str, password: str) -> Dict[str, Any]:
        errors = self.validate_register(name, email, password)
        if errors:
            return {"success": False, "error": errors[0], "errors": errors}
        return self._sign_in(User(email=email.strip(), name=name.strip()))

    def _sign_in(self, user: User) -> Dict[str, Any]:
        self.current_user = user
        self.user_repo.save_user(user)
        self.event_bus.emit(EVENTS["USER_LOGGED_IN"], {"user": user})
        return {
            "success": True,
            "user": user.to_dict(),
            "message": f"Welcome {user.display_name}!"
        }

    def logout(self) -> Dict[str, Any]:
        self.current_user = None
        self.user_repo.remove_user()
        self.event_bus.emit(EVENTS["USER_LOGGED_OUT"], {})
        return {"success": True, "message": "Signed out"}

    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def get_current_user(self) -> Optional[User]:
        return self.current_user
