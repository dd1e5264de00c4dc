from typing import Any, Optional

from pydantic import BaseModel


class AdminLogin(BaseModel):
    # Any JSON value; anything but the exact key string is a failed login
    password: Any = None


class LoginResponse(BaseModel):
    ok: bool
    message: Optional[str] = None
