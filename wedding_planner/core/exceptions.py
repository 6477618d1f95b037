from typing import Optional


class WeddingPlannerError(Exception):
    """Base class for errors raised by the wedding planner core"""


class NotAuthenticated(WeddingPlannerError):
    """No session, or the session does not resolve to a known principal"""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NoTenant(WeddingPlannerError):
    """The principal has not been assigned a wedding profile yet"""

    def __init__(self, user_id: Optional[int] = None):
        self.user_id = user_id
        super().__init__(f"User {user_id} has no wedding profile")


class AccessDenied(WeddingPlannerError):
    """The requested wedding profile is not the principal's own"""

    def __init__(self, user_id: Optional[int] = None, requested_id: Optional[int] = None):
        self.user_id = user_id
        self.requested_id = requested_id
        super().__init__(f"User {user_id} may not access wedding profile {requested_id}")


class StorageError(WeddingPlannerError):
    """Opaque persistence failure, reported upward without interpretation"""
