"""Profile, follow-graph and GitHub endpoints."""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from network.serializers import ProfileSerializer, ProfileSummarySerializer
from network.services import FollowReadService, FollowService, GithubRepoService, ProfileService


def profile_payload(profile):
    """
    Serialize a profile with its followers, following and counts.

    Reads the edge lists prefetched by ProfileService, so no query runs here.
    """
    following = [edge.following for edge in profile.following_edges.all()]
    followers = [edge.follower for edge in profile.follower_edges.all()]
    data = ProfileSerializer(profile).data
    data["followers"] = ProfileSummarySerializer(followers, many=True).data
    data["following"] = ProfileSummarySerializer(following, many=True).data
    data["counts"] = {"followers": len(followers), "following": len(following)}
    return data


@api_view(["GET", "POST", "DELETE"])
@permission_classes([AllowAny])
def profiles(request):
    """
    GET (public): every profile with its follow lists.
    POST: create or update the current user's profile.
    DELETE: delete the current user's account, profile and content.
    """
    service = ProfileService()
    if request.method == "GET":
        return Response([profile_payload(p) for p in service.list_profiles()])

    if not request.user or not request.user.is_authenticated:
        return Response({"msg": "No token, authorization denied"}, status=401)

    if request.method == "DELETE":
        service.delete_account(request.user.id)
        return Response({"msg": "User deleted"})

    profile = service.upsert_profile(request.user.id, request.data)
    return Response(profile_payload(profile))


@api_view(["GET"])
def my_profile(request):
    """The current user's profile."""
    return Response(profile_payload(ProfileService().get_by_user(request.user.id)))


@api_view(["GET"])
@permission_classes([AllowAny])
def profile_by_user(request, user_id):
    """Profile by owning user id (public)."""
    return Response(profile_payload(ProfileService().get_by_user(user_id)))


@api_view(["GET"])
@permission_classes([AllowAny])
def github_repos(request, username):
    """Latest public GitHub repositories for a username (public, cached)."""
    return Response(GithubRepoService().repos_for(username))


@api_view(["PUT"])
def follow(request, user_id):
    return Response(FollowService().follow(request.user.id, user_id))


@api_view(["PUT"])
def unfollow(request, user_id):
    return Response(FollowService().unfollow(request.user.id, user_id))


@api_view(["GET"])
@permission_classes([AllowAny])
def followers(request, profile_id):
    return Response(ProfileSummarySerializer(FollowReadService().list_followers(profile_id), many=True).data)


@api_view(["GET"])
@permission_classes([AllowAny])
def following(request, profile_id):
    return Response(ProfileSummarySerializer(FollowReadService().list_following(profile_id), many=True).data)
