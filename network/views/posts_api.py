"""Post, like, comment and feed endpoints."""

from rest_framework.decorators import api_view
from rest_framework.response import Response

from network.serializers import CommentSerializer, PostDetailSerializer, PostSerializer, UserSummarySerializer
from network.services import CommentService, FeedService, LikeService, PostService


def _image_refs(request):
    """Image references handed over by the upload step (JSON list or repeated form field)."""
    if hasattr(request.data, "getlist"):
        return request.data.getlist("images")
    images = request.data.get("images") or []
    return images if isinstance(images, list) else [images]


@api_view(["GET", "POST"])
def posts(request):
    """GET: all posts, newest first. POST: create a post."""
    service = PostService()
    if request.method == "POST":
        post = service.create_post(request.user.id, request.data, images=_image_refs(request))
        return Response(PostSerializer(post).data)
    return Response(PostSerializer(service.list_posts(), many=True).data)


@api_view(["GET"])
def feed(request):
    """Posts of everyone the current user follows."""
    return Response(PostSerializer(FeedService().get_feed(request.user.id), many=True).data)


@api_view(["GET", "DELETE"])
def post_detail(request, post_id):
    """GET: one post with comments and likes. DELETE: remove own post."""
    service = PostService()
    if request.method == "DELETE":
        return Response(service.delete_post(post_id, request.user.id))
    return Response(PostDetailSerializer(service.get_post(post_id)).data)


@api_view(["GET"])
def posts_by_user(request, user_id):
    """All posts by one author (empty list when the author has none)."""
    return Response(PostSerializer(PostService().list_posts_by_author(user_id), many=True).data)


@api_view(["PUT"])
def like(request, post_id):
    likers = LikeService().like_post(post_id, request.user.id)
    return Response(UserSummarySerializer(likers, many=True).data)


@api_view(["PUT"])
def unlike(request, post_id):
    likers = LikeService().unlike_post(post_id, request.user.id)
    return Response(UserSummarySerializer(likers, many=True).data)


@api_view(["POST"])
def add_comment(request, post_id):
    comments = CommentService().add_comment(post_id, request.user.id, request.data.get("text"))
    return Response(CommentSerializer(comments, many=True).data)


@api_view(["DELETE"])
def delete_comment(request, post_id, comment_id):
    comments = CommentService().delete_comment(comment_id, request.user.id, post_id=post_id)
    return Response(CommentSerializer(comments, many=True).data)
