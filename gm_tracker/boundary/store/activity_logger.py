"""
Activity logger.

Best-effort audit trail of user actions, written to the remote
activity_logs table. Never raises: failures only reach the diagnostic log.
Exists only in remote mode; the fallback store keeps no audit trail.

Dependencies: gm_tracker.boundary.remote
System role: Audit trail recorder for the remote data store
"""

import logging

from gm_tracker.boundary.remote.rest_client import RemoteBackendClient

logger = logging.getLogger(__name__)

ACTIVITY_TABLE = "activity_logs"


class ActivityAction:
    """Action tags written to the audit trail."""

    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"
    CREATE_PROJECT = "CREATE_PROJECT"
    UPDATE_PROJECT = "UPDATE_PROJECT"
    DELETE_PROJECT = "DELETE_PROJECT"
    UPDATE_CUSTOMER = "UPDATE_CUSTOMER"


class ActivityLogger:
    """Writes one audit record per significant mutation."""

    def __init__(self, client: RemoteBackendClient) -> None:
        self._client = client

    async def log(self, action: str, details: str = "") -> None:
        """
        Record an action for the signed-in user.

        Nothing is written when no user with an email is signed in.

        Args:
            action: Action tag (see ActivityAction)
            details: Free-text detail
        """
        try:
            user = await self._client.get_user()
            if not user or not user.get("email"):
                return
            await self._client.insert(
                ACTIVITY_TABLE,
                {"user_email": user["email"], "action": action, "details": details or ""},
            )
        except Exception as e:
            logger.warning(
                "Failed to log activity",
                extra={"action": action, "error_type": type(e).__name__, "error_msg": str(e)},
            )
