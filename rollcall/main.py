import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
import sys

from rollcall.api.v1.admin_auth import admin_routes
from rollcall.api.v1.students import str_router
from rollcall.api.v1.attendance import router
from rollcall.config import settings
from rollcall.core.exceptions import RollcallError
from rollcall.database import database

handlers = [logging.StreamHandler(sys.stdout)]
if settings.log_file:
    handlers.append(logging.FileHandler(settings.log_file, encoding='utf-8'))

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=handlers
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application...")
    try:
        await database.connect()
        logger.info("Database connected and tables ready")
    except Exception as e:
        # Requests will retry the connection lazily
        logger.error(f"Error during startup: {e}", exc_info=True)

    logger.info("Application startup complete")
    yield

    logger.info("Shutting down application...")
    try:
        await database.disconnect()
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Rollcall Attendance API",
    description="Student roster and daily attendance for a single cohort",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(admin_routes, prefix=settings.api_prefix)
app.include_router(str_router, prefix=settings.api_prefix)
app.include_router(router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    return {
        "message": "Welcome to Rollcall Attendance API",
        "version": "1.0.0",
        "endpoints": {
            "health": f"{settings.api_prefix}/health",
            "login": f"{settings.api_prefix}/login",
            "students": f"{settings.api_prefix}/students",
            "attendance": f"{settings.api_prefix}/attendance",
            "attendance_by_date": f"{settings.api_prefix}/attendance/date/{{date}}"
        }
    }


@app.get(f"{settings.api_prefix}/health")
async def health_check():
    try:
        await database.check_connection()
        return {"ok": True, "time": datetime.now(timezone.utc).isoformat()}
    except Exception as e:
        logger.error(f"Health check error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"ok": False, "error": str(e)})


@app.exception_handler(RollcallError)
async def rollcall_exception_handler(request: Request, exc: RollcallError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()) if part != 'body')}: {error.get('msg')}"
        for error in errors
    )
    logger.warning(f"Rejected malformed request to {request.url.path}: {details}")
    return JSONResponse(status_code=400, content={"message": details or "Malformed request"})


# Error handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": str(exc) or "Internal server error"})


if __name__ == "__main__":
    uvicorn.run("rollcall.main:app", host=settings.host, port=settings.port, reload=False)
