"""Session management models."""

from datetime import datetime, timedelta
from typing import NewType

from pydantic import BaseModel, Field

from careerhub.utils import now

AuthToken = NewType("AuthToken", str)

SESSION_TTL = timedelta(hours=24)


class Session(BaseModel):
    """Admin authentication session. Lives only in process memory."""

    auth_token: str
    created_at: datetime = Field(default_factory=now)
    ttl: timedelta = SESSION_TTL

    @property
    def expires_at(self) -> datetime:
        return self.created_at + self.ttl

    def is_expired(self, at: datetime) -> bool:
        return at >= self.expires_at
