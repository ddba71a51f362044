from learnhub.presentation.api.routers.categories import router as categories_router
from learnhub.presentation.api.routers.content import router as content_router
from learnhub.presentation.api.routers.users import router as users_router

__all__ = [
    "categories_router",
    "content_router",
    "users_router",
]
