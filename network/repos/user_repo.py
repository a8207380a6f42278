"""Repository helpers for user lookups."""

from typing import Optional

from network.db_accessor import DB_Accessor
from network.models.user import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def get_by_id(self, user_id) -> Optional[User]:
        """Return a user by id, or None."""
        return self.first(id=user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """Return a user by (case-insensitive) email, or None."""
        return self.model.objects.filter(email__iexact=email).first()

    def email_taken(self, email: str) -> bool:
        """Return True if another account already uses this email."""
        return self.model.objects.filter(email__iexact=email).exists()
