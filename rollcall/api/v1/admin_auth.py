import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from rollcall.core.security import verify_admin_key
from rollcall.schemas.admin_schemas import AdminLogin, LoginResponse

# Setup logger
logger = logging.getLogger(__name__)

admin_routes = APIRouter(tags=["admin"])


@admin_routes.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
async def login_admin(login_data: AdminLogin):
    """
    Check the admin password.

    No session is issued: on success the client keeps the password and
    sends it back as the x-admin-key header on protected calls.
    """
    if not verify_admin_key(login_data.password):
        logger.warning("Failed admin login attempt")
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"ok": False, "message": "Invalid credentials"}
        )

    logger.info("Successful admin login")
    return LoginResponse(ok=True)
