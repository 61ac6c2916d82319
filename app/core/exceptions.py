class VaultError(Exception):
    """Base class for the failures the core reports to its callers"""

    default_detail = "Error"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidRequest(VaultError):
    """A required field is missing or empty, or a lifetime is out of range"""

    default_detail = "Invalid request"


class Unauthorized(VaultError):
    """The supplied password does not match the folder"""

    default_detail = "Bad password"


class NotFound(VaultError):
    """The resource is absent, expired, or outside the caller's folder"""

    default_detail = "Not found"
