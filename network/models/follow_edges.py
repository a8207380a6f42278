"""Paired junction tables for the follow graph.

One logical edge A -> B is stored twice: a Following row owned by A and
a Follower row owned by B. FollowService writes and removes the pair in a
single transaction; nothing else should touch these tables directly.
"""

from __future__ import annotations
import uuid
from django.db import models
from django.db.models import Q, F

from .profile import Profile


def _uuid7_or_4() -> uuid.UUID:
    """Return uuid7 when available, else uuid4 (for primary keys)."""
    return getattr(uuid, "uuid7", uuid.uuid4)()


class Following(models.Model):
    """Outbound record: `profile` follows `following`."""
    id = models.UUIDField(primary_key=True, default=_uuid7_or_4, editable=False)

    profile = models.ForeignKey(
        Profile,
        on_delete=models.CASCADE,
        related_name="following_edges",   # profile.following_edges -> who this profile follows
        db_column="profile_id",
    )
    following = models.ForeignKey(
        Profile,
        on_delete=models.CASCADE,
        related_name="+",
        db_column="following_id",
    )

    class Meta:
        """Constraints for outbound edges."""
        db_table = "following"
        constraints = [
            models.UniqueConstraint(fields=["profile", "following"], name="uniq_following_profile_following"),
            models.CheckConstraint(condition=~Q(profile=F("following")), name="chk_following_not_self"),
        ]

    def __str__(self) -> str:
        return f"Following(profile={self.profile_id}, following={self.following_id})"


class Follower(models.Model):
    """Inbound record: `follower` follows `profile`."""
    id = models.UUIDField(primary_key=True, default=_uuid7_or_4, editable=False)

    profile = models.ForeignKey(
        Profile,
        on_delete=models.CASCADE,
        related_name="follower_edges",    # profile.follower_edges -> who follows this profile
        db_column="profile_id",
    )
    follower = models.ForeignKey(
        Profile,
        on_delete=models.CASCADE,
        related_name="+",
        db_column="follower_id",
    )

    class Meta:
        """Constraints for inbound edges."""
        db_table = "followers"
        constraints = [
            models.UniqueConstraint(fields=["profile", "follower"], name="uniq_followers_profile_follower"),
            models.CheckConstraint(condition=~Q(profile=F("follower")), name="chk_followers_not_self"),
        ]

    def __str__(self) -> str:
        return f"Follower(profile={self.profile_id}, follower={self.follower_id})"
