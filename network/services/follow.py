"""Follow / unfollow between profiles, always as a paired edge."""

import logging

from django.db import IntegrityError, transaction

from network.exceptions import Conflict, InvalidOperation, NotFound
from network.models import Profile
from network.repos import FollowRepo

from .storage import storage_guard

logger = logging.getLogger(__name__)


class FollowService:
    """Write side of the follow graph.

    Callers address users; edges connect the users' profiles. Each logical
    edge is the Following/Follower pair written or removed by FollowRepo
    inside one transaction, so no reader ever sees half an edge.
    """

    def __init__(self, follow_repo: FollowRepo | None = None) -> None:
        self.follow_repo = follow_repo or FollowRepo()

    def _profiles_for(self, follower_user_id, followee_user_id):
        followee = Profile.objects.select_for_update().filter(user_id=followee_user_id).first()
        if followee is None:
            raise NotFound("Profile not found")
        follower = Profile.objects.filter(user_id=follower_user_id).first()
        if follower is None:
            raise NotFound("Create a profile before following other users")
        return follower, followee

    @storage_guard
    def follow(self, follower_user_id, followee_user_id):
        """Create the edge follower -> followee."""
        if str(follower_user_id) == str(followee_user_id):
            raise InvalidOperation("You cannot follow yourself")

        try:
            with transaction.atomic():
                follower, followee = self._profiles_for(follower_user_id, followee_user_id)
                if self.follow_repo.is_following(profile_id=follower.id, followee_id=followee.id):
                    raise Conflict("You are already following this user")
                self.follow_repo.add_edge(profile_id=follower.id, followee_id=followee.id)
        except IntegrityError as exc:
            # a concurrent follow inserted the same pair first
            raise Conflict("You are already following this user") from exc

        logger.info("User %s followed user %s", follower_user_id, followee_user_id)
        return {"msg": "User followed"}

    @storage_guard
    def unfollow(self, follower_user_id, followee_user_id):
        """Remove the edge follower -> followee."""
        if str(follower_user_id) == str(followee_user_id):
            raise InvalidOperation("You cannot unfollow yourself")

        with transaction.atomic():
            follower, followee = self._profiles_for(follower_user_id, followee_user_id)
            removed = self.follow_repo.remove_edge(profile_id=follower.id, followee_id=followee.id)
            if not removed:
                raise NotFound("You are not following this user")

        logger.info("User %s unfollowed user %s", follower_user_id, followee_user_id)
        return {"msg": "User unfollowed"}
