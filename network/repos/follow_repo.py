"""Repository helpers for the paired follow-edge tables."""

from typing import List

from django.db.models import QuerySet

from network.models import Follower, Following, Profile


class FollowRepo:
    """Reads and writes both directions of a follow edge.

    `add_edge` and `remove_edge` touch both tables and must run inside the
    caller's transaction.
    """

    def __init__(self, following_model=Following, follower_model=Follower) -> None:
        self.following_model = following_model
        self.follower_model = follower_model

    def is_following(self, *, profile_id, followee_id) -> bool:
        """Return True if profile_id follows followee_id."""
        return self.following_model.objects.filter(
            profile_id=profile_id, following_id=followee_id
        ).exists()

    def add_edge(self, *, profile_id, followee_id) -> None:
        """Insert the outbound and inbound records of one edge."""
        self.following_model.objects.create(profile_id=profile_id, following_id=followee_id)
        self.follower_model.objects.create(profile_id=followee_id, follower_id=profile_id)

    def remove_edge(self, *, profile_id, followee_id) -> int:
        """Delete both records of one edge; return the number of rows removed."""
        out_count, _ = self.following_model.objects.filter(
            profile_id=profile_id, following_id=followee_id
        ).delete()
        in_count, _ = self.follower_model.objects.filter(
            profile_id=followee_id, follower_id=profile_id
        ).delete()
        return out_count + in_count

    def following_profiles(self, profile_id) -> QuerySet:
        """Profiles followed by profile_id, joined with their users."""
        return Profile.objects.filter(
            id__in=self.following_model.objects.filter(profile_id=profile_id).values("following_id")
        ).select_related("user")

    def follower_profiles(self, profile_id) -> QuerySet:
        """Profiles following profile_id, joined with their users."""
        return Profile.objects.filter(
            id__in=self.follower_model.objects.filter(profile_id=profile_id).values("follower_id")
        ).select_related("user")

    def followee_user_ids(self, profile_id) -> List[int]:
        """User ids behind every profile that profile_id follows."""
        return list(
            self.following_model.objects.filter(profile_id=profile_id)
            .values_list("following__user_id", flat=True)
            .distinct()
        )

    def following_count(self, profile_id) -> int:
        return self.following_model.objects.filter(profile_id=profile_id).count()

    def follower_count(self, profile_id) -> int:
        return self.follower_model.objects.filter(profile_id=profile_id).count()
