from django.contrib.auth.models import AnonymousUser
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError


class JWTIdentityMiddleware:
    """Bind bearer-token identities for endpoints outside DRF (GraphQL).

    DRF views authenticate on their own; this only fills ``request.user`` for
    plain Django views when a valid access token is presented.
    """

    jwt_paths = ('/graphql/',)

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.path.startswith(self.jwt_paths):
            token = self.get_token_from_request(request)
            if token is not None:
                auth = JWTAuthentication()
                try:
                    validated_token = auth.get_validated_token(token)
                    request.user = auth.get_user(validated_token)
                except (InvalidToken, TokenError, AuthenticationFailed):
                    # Do not block; continue unauthenticated
                    request.user = AnonymousUser()

        return self.get_response(request)

    def get_token_from_request(self, request):
        header = request.META.get('HTTP_AUTHORIZATION')
        if header and header.startswith('Bearer '):
            return header.split(' ')[1].encode('utf-8')
        return None
