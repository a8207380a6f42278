"""Account endpoints: signup and the current user."""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from network.serializers import AccountSerializer
from network.services import UserService


@api_view(["POST"])
@permission_classes([AllowAny])
def signup(request):
    """Register a user (name, email, password, optional avatar)."""
    user = UserService().create_user(
        name=request.data.get("name"),
        email=request.data.get("email"),
        password=request.data.get("password"),
        avatar=request.data.get("avatar"),
    )
    return Response(AccountSerializer(user).data, status=status.HTTP_201_CREATED)


@api_view(["GET"])
def current_user(request):
    """Return the authenticated user's account."""
    return Response(AccountSerializer(request.user).data)
