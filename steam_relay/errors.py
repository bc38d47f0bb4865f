"""
Error taxonomy for the relay.
Route handlers raise these; the app-level error handlers render them.
"""


class RelayError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"success": False, "message": self.message}


class ValidationError(RelayError):
    """A required request field is missing or empty."""

    status_code = 400

    def __init__(self, field_name):
        super().__init__(f"Missing field: {field_name}")
        self.field_name = field_name

    def to_dict(self):
        return {"error": self.message}


class UpstreamError(RelayError):
    """
    The partner API was unreachable, answered non-2xx, sent a malformed reply
    or reported a failed result. `detail` is for the server log only; clients
    see `message`.
    """

    def __init__(self, message, detail=None):
        super().__init__(message)
        self.detail = detail


class NotFound(RelayError):
    status_code = 404


class CatalogError(RelayError):
    """The price catalog file could not be read or parsed."""
