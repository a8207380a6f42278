from .users import UserService
from .profile import ProfileService
from .follow import FollowService
from .follow_read import FollowReadService
from .posts import PostService
from .likes import LikeService
from .comments import CommentService
from .feed import FeedService
from .github import GithubRepoService

__all__ = [
    "UserService",
    "ProfileService",
    "FollowService",
    "FollowReadService",
    "PostService",
    "LikeService",
    "CommentService",
    "FeedService",
    "GithubRepoService",
]
