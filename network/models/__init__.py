from .user import User
from .profile import Profile
from .follow_edges import Following, Follower
from .post import Post
from .comment import Comment
from .like import Like

__all__ = [
    "User",
    "Profile",
    "Following",
    "Follower",
    "Post",
    "Comment",
    "Like",
]
