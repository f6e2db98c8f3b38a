from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from shs_enrollment.config import settings
from shs_enrollment.database import check_connection
from shs_enrollment.exceptions import EnrollmentError
from shs_enrollment.routes import (
    enrollees_router,
    documents_router,
    semester_router,
    windows_router,
    health_router,
)

# Init app
app = FastAPI(title=f"{settings.SCHOOL_CODE} Enrollment Backend", debug=settings.DEBUG)

# Enable logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

origins = [
    "http://localhost",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5500",
    "http://127.0.0.1:5500",
    "http://localhost:8000",
    "http://127.0.0.1:8000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=600
)

routers = [
    enrollees_router,
    documents_router,
    semester_router,
    windows_router,
    health_router,
]

for router in routers:
    app.include_router(router)
    logger.info(f"Included router: {router.prefix}")


@app.get("/", include_in_schema=False)
async def root():
    return {
        "status": "ok",
        "message": f"Welcome to the {settings.SCHOOL_NAME} Enrollment API",
        "version": "1.0.0",
        "docs": "/docs",
    }


# Domain errors carry their own HTTP status
@app.exception_handler(EnrollmentError)
async def enrollment_error_handler(request: Request, exc: EnrollmentError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.on_event("startup")
async def startup_event():
    logger.info(f"🚀 {settings.SCHOOL_CODE} Enrollment Backend starting up...")
    check_connection()
    logger.info("✅ Server is ready to handle requests")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"🛑 {settings.SCHOOL_CODE} Enrollment Backend shutting down...")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "shs_enrollment.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
