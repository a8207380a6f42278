from .user_repo import UserRepo
from .post_repo import PostRepo
from .follow_repo import FollowRepo

__all__ = ["UserRepo", "PostRepo", "FollowRepo"]
