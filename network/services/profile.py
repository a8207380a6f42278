"""Service helpers for creating, reading and deleting profiles."""

import logging

from django.db import IntegrityError, transaction
from django.db.models import Prefetch

from network.exceptions import NotFound, ValidationError
from network.models import Follower, Following, Profile
from network.utils import field_error, split_comma_list

from .storage import storage_guard
from .users import UserService

logger = logging.getLogger(__name__)

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram", "codepen", "github")


class ProfileService:
    """Encapsulate the profile store."""

    def __init__(self, user_service: UserService | None = None) -> None:
        self.user_service = user_service or UserService()

    def _with_edges(self):
        """Profiles joined with their user and both follow lists, in a fixed number of queries."""
        return Profile.objects.select_related("user").prefetch_related(
            Prefetch("following_edges", queryset=Following.objects.select_related("following__user")),
            Prefetch("follower_edges", queryset=Follower.objects.select_related("follower__user")),
        )

    def build_fields(self, data):
        """Validate raw input and return the model field values."""
        bio = (data.get("bio") or "").strip()
        skills = split_comma_list(data.get("skills"))
        errors = []
        if not bio:
            errors.append(field_error("bio", "Bio is required"))
        if not skills:
            errors.append(field_error("skills", "Skills is required"))
        if errors:
            raise ValidationError.from_fields(errors)

        social = {}
        for site in SOCIAL_NETWORKS:
            handle = (data.get(site) or "").strip()
            if handle:
                social[site] = handle

        return {
            "bio": bio,
            "skills": skills,
            "website": (data.get("website") or "").strip(),
            "location": (data.get("location") or "").strip(),
            "github_username": (data.get("github_username") or data.get("githubUsername") or "").strip(),
            "social": social,
        }

    @storage_guard
    def upsert_profile(self, user_id, data):
        """Create the user's profile, or overwrite it when one exists."""
        fields = self.build_fields(data)
        self.user_service.get_user(user_id)
        try:
            with transaction.atomic():
                _, created = Profile.objects.update_or_create(
                    user_id=user_id, defaults=fields
                )
        except IntegrityError:
            # a concurrent create won the unique user_id slot; update that row
            with transaction.atomic():
                Profile.objects.filter(user_id=user_id).update(**fields)
            created = False
        logger.info("%s profile for user %s", "Created" if created else "Updated", user_id)
        return self.get_by_user(user_id)

    @storage_guard
    def get_by_user(self, user_id):
        """Return the user's profile with its user and follow lists, or raise NotFound."""
        profile = self._with_edges().filter(user_id=user_id).first()
        if profile is None:
            raise NotFound("There is no profile for this user")
        return profile

    @storage_guard
    def get(self, profile_id):
        """Return a profile by its own id, or raise NotFound."""
        profile = self._with_edges().filter(id=profile_id).first()
        if profile is None:
            raise NotFound("Profile not found")
        return profile

    @storage_guard
    def list_profiles(self):
        """Return every profile joined with its user and follow lists."""
        return list(self._with_edges().order_by("-date"))

    def delete_account(self, user_id):
        """Delete the profile together with its user (see UserService.delete_account)."""
        self.user_service.delete_account(user_id)
