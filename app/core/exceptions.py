from typing import Dict


class ServiceError(Exception):
    """Generic service-layer error raised by the identity directory."""
    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class AccountNotFoundError(ServiceError):
    """The directory holds no account for the requested email."""


class CheckError(Exception):
    """Error reported to the caller of a user-existence check."""
    code = "internal"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> Dict[str, str]:
        return {"code": self.code, "message": self.message}


class InvalidArgumentError(CheckError):
    code = "invalid-argument"
    status_code = 400


class InternalError(CheckError):
    code = "internal"
    status_code = 500
