from fastapi import APIRouter
from pydantic import BaseModel, Field

from careerhub.web.deps import AppDep, OptionalAuthTokenDep
from careerhub.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Authentication request."""

    username: str = Field(..., description="Admin username")
    password: str = Field(..., description="Admin password")


class LoginResponse(BaseModel):
    """Authentication response."""

    token: str = Field(..., description="Bearer token for subsequent requests, valid for 24 hours")


class LogoutResponse(BaseModel):
    ok: bool = True


@router.post(
    "/auth/login",
    summary="Authenticate admin",
    description="Authenticate with the admin username and password to receive a bearer token.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(login_data: LoginRequest, app: AppDep) -> LoginResponse:
    token = await app.login(login_data.username, login_data.password)
    return LoginResponse(token=token)


@router.post(
    "/auth/logout",
    summary="End session",
    description="Invalidate the presented bearer token. Succeeds even without a valid token.",
    operation_id="logout",
    responses={200: {"description": "Logged out"}},
)
async def logout(app: AppDep, auth_token: OptionalAuthTokenDep) -> LogoutResponse:
    await app.logout(auth_token)
    return LogoutResponse()
