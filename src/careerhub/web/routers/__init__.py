from careerhub.web.routers.auth import router as auth_router
from careerhub.web.routers.contact import router as contact_router
from careerhub.web.routers.posts import router as posts_router

__all__ = [
    "auth_router",
    "contact_router",
    "posts_router",
]
