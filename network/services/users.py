"""Service helpers for account creation, lookup and deletion."""

import logging

from django.db import IntegrityError, transaction

from network.exceptions import Conflict, NotFound, ValidationError
from network.repos import UserRepo
from network.utils import field_error

from .storage import storage_guard

logger = logging.getLogger(__name__)


class UserService:
    """Encapsulate the identity store: signup, lookup and account deletion."""

    def __init__(self, user_repo: UserRepo | None = None) -> None:
        self.user_repo = user_repo or UserRepo()

    @storage_guard
    def create_user(self, *, name, email, password, avatar=None, username=None):
        """Create an account; the avatar falls back to the email's gravatar."""
        name = (name or "").strip()
        email = (email or "").strip()
        errors = []
        if not name:
            errors.append(field_error("name", "Name is required"))
        if not email or "@" not in email:
            errors.append(field_error("email", "Please include a valid email"))
        if not password or len(password) < 6:
            errors.append(field_error("password", "Please enter a password with 6 or more characters"))
        if errors:
            raise ValidationError.from_fields(errors)

        if self.user_repo.email_taken(email):
            raise Conflict("User already exists")

        try:
            with transaction.atomic():
                user = self.user_repo.model.objects.create_user(
                    username=username or email,
                    email=email,
                    password=password,
                    name=name,
                    avatar=avatar or "",
                )
        except IntegrityError as exc:
            raise Conflict("User already exists") from exc
        logger.info("Created user %s", user.id)
        return user

    @storage_guard
    def get_user(self, user_id):
        """Fetch a user by id or raise NotFound."""
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    @storage_guard
    def delete_account(self, user_id):
        """
        Delete a user and everything they own in one transaction.

        The profile (and with it both directions of every follow edge), the
        user's posts with their comments and likes, and the user's own
        comments and likes elsewhere are removed through ON DELETE CASCADE.
        """
        with transaction.atomic():
            user = self.user_repo.model.objects.select_for_update().filter(id=user_id).first()
            if user is None:
                raise NotFound("User not found")
            user.delete()
        logger.info("Deleted account %s", user_id)
