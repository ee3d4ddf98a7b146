from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from careerhub.app import App
from careerhub.core.modules.session.models import AuthToken
from careerhub.errors import UnauthorizedError

# Security scheme: "Authorization: Bearer <token>"
bearer_scheme = HTTPBearer(auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_optional_auth_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
) -> AuthToken | None:
    """Extract the bearer token without validating it. Malformed headers count as absent."""
    if credentials and credentials.scheme.lower() == "bearer" and credentials.credentials:
        return AuthToken(credentials.credentials)
    return None


async def get_auth_token(
    app: Annotated[App, Depends(get_app)],
    auth_token: Annotated[AuthToken | None, Depends(get_optional_auth_token)] = None,
) -> AuthToken:
    """Get and validate auth token from the Authorization Bearer header."""
    if auth_token and await app.is_auth_token_valid(auth_token):
        return auth_token
    raise UnauthorizedError


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
AuthTokenDep = Annotated[AuthToken, Depends(get_auth_token)]
OptionalAuthTokenDep = Annotated[AuthToken | None, Depends(get_optional_auth_token)]
