# shs_enrollment/routes/health.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text
import datetime
import logging
import sys

import psutil

from shs_enrollment.config import settings
from shs_enrollment.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/health",
    tags=["Health Check"]
)


@router.get("")
async def health_check(db: Session = Depends(get_db)):
    """
    Database connectivity plus a snapshot of host resources
    """
    health_status = {
        "status": "healthy",
        "timestamp": datetime.datetime.now().isoformat(),
        "service": f"{settings.SCHOOL_CODE} Enrollment API",
        "version": "1.0.0",
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["database"] = {
            "status": "connected",
            "type": db.get_bind().dialect.name,
        }
    except Exception as e:
        logger.error(f"Health check database query failed: {e}")
        health_status["database"] = {
            "status": "disconnected",
            "error": str(e),
        }
        health_status["status"] = "degraded"

    health_status["system"] = {
        "python_version": sys.version,
        "platform": sys.platform,
        "cpu_percent": psutil.cpu_percent(interval=None),
        "memory_percent": psutil.virtual_memory().percent,
    }

    logger.info(f"Health check completed: {health_status['status']}")
    return JSONResponse(
        content=health_status,
        headers={
            "Cache-Control": "no-cache, no-store, must-revalidate",
            "X-Health-Check": "true",
        },
    )


@router.get("/ping")
async def ping():
    """Minimal keep-alive response"""
    return {
        "status": "pong",
        "timestamp": datetime.datetime.now().isoformat(),
    }
