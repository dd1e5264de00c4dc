import hmac
import logging
from typing import Any, Optional

from rollcall.config import settings

logger = logging.getLogger(__name__)


def verify_admin_key(candidate: Any, admin_key: Optional[str] = None) -> bool:
    """
    Compare a presented secret with the configured admin key.

    Args:
        candidate: Value from the x-admin-key header or the login password
        admin_key: Expected secret, defaults to the configured ADMIN_KEY

    Returns:
        True only when both values are non-empty and exactly equal
    """
    expected = settings.admin_key if admin_key is None else admin_key

    if not expected:
        logger.warning("ADMIN_KEY is not configured; refusing admin access")
        return False
    if not isinstance(candidate, str) or not candidate:
        return False

    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
