import logging

from django.contrib.auth import get_user_model
from rest_framework import authentication
from rest_framework import exceptions

from .firebase_admin_client import verify_id_token

logger = logging.getLogger(__name__)
User = get_user_model()


class FirebaseAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend validating Firebase ID tokens.

    Accepts `Authorization: Bearer <token>` as well as a bare token. The
    verified email claim selects the local account.
    """

    def authenticate(self, request):
        """Validate Authorization header token and return (user, auth)."""
        auth_header = request.META.get('HTTP_AUTHORIZATION')
        if not auth_header:
            return None

        id_token = auth_header.split(' ').pop()

        try:
            decoded_token = verify_id_token(id_token)
        except Exception as exc:
            logger.debug("Rejected Firebase token: %s", exc)
            raise exceptions.AuthenticationFailed('Invalid token')

        email = decoded_token.get("email")
        user = User.objects.filter(email__iexact=email).first() if email else None
        if user is None or not user.is_active:
            raise exceptions.AuthenticationFailed('User not found')
        return (user, decoded_token)

    def authenticate_header(self, request):
        return 'Bearer'
