# backend/app/services/existence_checker.py
import logging
from typing import Any, Protocol
from pydantic import ValidationError
from ..core.exceptions import AccountNotFoundError, InternalError, InvalidArgumentError
from ..schemas.users import (
    AccountRecord,
    CheckUserExistsIn,
    CheckUserExistsOut,
    UserFoundOut,
    UserNotFoundOut,
)

log = logging.getLogger(__name__)

INVALID_EMAIL_MESSAGE = "A valid email must be provided."


class IdentityDirectory(Protocol):
    def get_user_by_email(self, email: str) -> AccountRecord: ...


class ExistenceChecker:
    """
    Answers "is there an account for this email?".

    validate -> lookup -> classify. A missing account is a normal result
    (UserNotFoundOut); every other directory failure becomes InternalError
    with the provider's message untouched.
    """

    def __init__(self, directory: IdentityDirectory):
        self.directory = directory

    @staticmethod
    def parse(payload: Any) -> CheckUserExistsIn:
        if not isinstance(payload, dict):
            raise InvalidArgumentError(INVALID_EMAIL_MESSAGE)
        try:
            return CheckUserExistsIn.model_validate(payload)
        except ValidationError as e:
            log.info("Rejected user-exists request: %s", e.errors(include_url=False, include_input=False))
            raise InvalidArgumentError(INVALID_EMAIL_MESSAGE) from e

    def check(self, payload: Any) -> CheckUserExistsOut:
        request = self.parse(payload)

        try:
            record = self.directory.get_user_by_email(request.email)
        except AccountNotFoundError:
            log.debug("No account for %s", request.email)
            return UserNotFoundOut()
        except Exception as e:
            log.warning("Identity directory lookup failed: %s", e)
            raise InternalError(str(e)) from e

        log.debug("Account %s found for %s", record.uid, request.email)
        return UserFoundOut(
            uid=record.uid,
            name=record.display_name or None,
            photo_url=record.photo_url or None,
        )
