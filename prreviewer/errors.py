"""Error taxonomy shared by the service operations and the HTTP layer.

Operations raise these; the error handlers registered in ``create_app``
render them as ``{"error": {"code": ..., "message": ...}}``.
"""


class ServiceError(Exception):
    code = "INTERNAL"
    status = 500

    def __init__(self, message, code=None, status=None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status is not None:
            self.status = status

    def to_dict(self):
        return {"error": {"code": self.code, "message": self.message}}


class ValidationError(ServiceError):
    code = "BAD_REQUEST"
    status = 400


class NotFoundError(ServiceError):
    code = "NOT_FOUND"
    status = 404


class ConflictError(ServiceError):
    """Business rule violated by the current state of the store."""

    status = 409

    # TEAM_EXISTS is a 400 in the published API contract
    STATUS_BY_CODE = {"TEAM_EXISTS": 400}

    def __init__(self, code, message):
        super().__init__(message, code=code, status=self.STATUS_BY_CODE.get(code, 409))


class StorageError(ServiceError):
    """Transaction or driver failure. Never carries driver text to the client."""

    code = "INTERNAL"
    status = 500

    def __init__(self, message="db error"):
        super().__init__(message)


TEAM_EXISTS = "TEAM_EXISTS"
PR_EXISTS = "PR_EXISTS"
PR_MERGED = "PR_MERGED"
NOT_ASSIGNED = "NOT_ASSIGNED"
NO_CANDIDATE = "NO_CANDIDATE"
