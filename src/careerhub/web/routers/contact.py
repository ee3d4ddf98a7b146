from fastapi import APIRouter
from pydantic import BaseModel, Field

from careerhub.core.modules.notification.models import ContactMessage, SubscribeMessage
from careerhub.web.deps import AppDep, AuthTokenDep
from careerhub.web.openapi import ErrorResponse

router = APIRouter(tags=["contact"])


class MessageResponse(BaseModel):
    message: str = Field(..., description="Confirmation message")


class VerifyEmailResponse(BaseModel):
    ok: bool = True
    message: str = "SMTP connection verified"


@router.post(
    "/contact",
    summary="Send contact message",
    description="Relay a contact form message to the site owner. Delivery happens in the background.",
    operation_id="sendContactMessage",
    responses={
        200: {"description": "Message accepted"},
        422: {"description": "Missing or empty fields"},
    },
)
async def send_contact_message(request: ContactMessage, app: AppDep) -> MessageResponse:
    await app.submit_contact(request)
    return MessageResponse(message="Message sent successfully")


@router.post(
    "/subscribe",
    summary="Subscribe to newsletter",
    description="Register an email address for the newsletter. The site owner is notified in the background.",
    operation_id="subscribe",
    responses={
        200: {"description": "Subscription accepted"},
        422: {"description": "Missing email"},
    },
)
async def subscribe(request: SubscribeMessage, app: AppDep) -> MessageResponse:
    await app.subscribe(request)
    return MessageResponse(message="Successfully subscribed to newsletter")


@router.get(
    "/email/verify",
    summary="Verify SMTP connection",
    description="Connect and log in to the configured SMTP server to diagnose email delivery.",
    operation_id="verifyEmail",
    responses={
        200: {"description": "SMTP connection verified"},
        400: {"model": ErrorResponse, "description": "Email delivery is not configured"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        502: {"model": ErrorResponse, "description": "SMTP server unreachable or login rejected"},
    },
)
async def verify_email(app: AppDep, auth_token: AuthTokenDep) -> VerifyEmailResponse:
    await app.verify_email(auth_token)
    return VerifyEmailResponse()
