import logging
import threading
from typing import Any, Dict, List, Optional
from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError
from ..core.aws import AwsSessionFactory
from ..core.config import settings
from ..core.exceptions import AccountNotFoundError, ServiceError
from ..schemas.users import AccountRecord

log = logging.getLogger(__name__)


def _escape_filter_value(value: str) -> str:
    # ListUsers filter values are double-quoted
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _attributes(user: Dict[str, Any]) -> Dict[str, str]:
    return {a["Name"]: a.get("Value", "") for a in user.get("Attributes", []) if "Name" in a}


class CognitoService:
    """
    Identity directory backed by a Cognito user pool.
    The boto3 client is created on first use and then reused for the
    lifetime of the service instance.
    """

    def __init__(self, *, user_pool_id: Optional[str] = None, client: Optional[BaseClient] = None):
        self._client = client
        self._client_lock = threading.Lock()
        self.user_pool_id = user_pool_id or settings.aws_cognito_user_pool_id

    @property
    def client(self) -> BaseClient:
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    session = AwsSessionFactory.get_session()
                    self._client = session.client("cognito-idp", endpoint_url=settings.aws_endpoint_url)
        return self._client

    def get_user_by_email(self, email: str) -> AccountRecord:
        """
        Look up a single account by its email attribute.
        Works even if username != email.

        Raises AccountNotFoundError when the pool has no such user and
        ServiceError (message taken from the provider) for anything else.
        """
        if not self.user_pool_id:
            raise ServiceError("Cognito user pool id is not configured")

        try:
            resp = self.client.list_users(
                UserPoolId=self.user_pool_id,
                Filter=f'email = "{_escape_filter_value(email)}"',
                Limit=1,
            )
        except ClientError as err:
            error = err.response.get("Error", {})
            message = error.get("Message") or str(err)
            if error.get("Code") == "UserNotFoundException":
                raise AccountNotFoundError(message, cause=err) from err
            raise ServiceError(message, cause=err) from err
        except BotoCoreError as err:
            raise ServiceError(str(err), cause=err) from err

        users: List[Dict[str, Any]] = resp.get("Users") or []
        if not users:
            raise AccountNotFoundError("No user record found for the provided email")
        return self._to_record(users[0])

    @staticmethod
    def _to_record(user: Dict[str, Any]) -> AccountRecord:
        attrs = _attributes(user)
        uid = attrs.get("sub") or user.get("Username")
        if not uid:
            raise ServiceError("Cognito returned a user without 'sub' or 'Username'")
        return AccountRecord(
            uid=uid,
            display_name=attrs.get("name") or None,
            photo_url=attrs.get("picture") or None,
        )
