"""
User data model
"""
import random
import string
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Any


def _referral_code() -> str:
    return "REF" + "".join(random.choices(string.ascii_uppercase + string.digits, k=6))


@dataclass
class User:
    """Signed-in customer; the email doubles as the user id"""
    email: str
    name: str = "User"
    referral_code: str = field(default_factory=_referral_code)
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @property
    def id(self) -> str:
        return self.email

    @property
    def display_name(self) -> str:
        return self.name.split(" ")[0]

    @property
    def initials(self) -> str:
        return "".join(word[0] for word in self.name.split() if word).upper()[:2]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "email": self.email,
            "name": self.name,
            "referralCode": self.referral_code,
            "createdAt": self.created_at
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        user = cls(email=data["email"], name=data.get("name") or "User")
        if data.get("referralCode"):
            user.referral_code = data["referralCode"]
        if data.get("createdAt"):
            user.created_at = data["createdAt"]
        return user
