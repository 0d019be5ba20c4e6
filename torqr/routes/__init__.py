from .auth import router as auth_router
from .upload import router as upload_router

__all__ = ["auth_router", "upload_router"]
