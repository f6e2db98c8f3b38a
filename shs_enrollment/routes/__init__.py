from .enrollees import router as enrollees_router
from .documents import router as documents_router
from .semester import router as semester_router
from .windows import router as windows_router
from .health import router as health_router

# All routers that should be included in main app
__all__ = [
    "enrollees_router",
    "documents_router",
    "semester_router",
    "windows_router",
    "health_router",
]
