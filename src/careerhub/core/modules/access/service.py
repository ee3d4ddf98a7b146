from careerhub.core.core import Service
from careerhub.core.modules.session.models import AuthToken, Session


class AccessService(Service):
    async def ensure_authenticated(self, auth_token: AuthToken | None) -> Session:
        """Ensure the caller holds an active admin session."""
        return self.core.services.session.authorize(auth_token)
