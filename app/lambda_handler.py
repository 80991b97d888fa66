"""
Lambda entrypoint: check-user-exists
Purpose: report whether an account exists in the Cognito user pool for an email
Method: POST (API Gateway proxy integration)
Body: { "email": "<string>" }
"""
import base64
import binascii
import json
import logging
from typing import Any, Dict, Mapping

from .api.deps import get_existence_checker
from .core.exceptions import CheckError
from .core.logging_config import configure_logging

configure_logging()
log = logging.getLogger(__name__)

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization,X-Amz-Date,X-Api-Key,X-Amz-Security-Token",
    "Access-Control-Allow-Methods": "POST,OPTIONS",
}


def response(status_code: int, body: Any) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": CORS_HEADERS,
        "body": "" if body is None else json.dumps(body),
    }


def _parse_body(event: Mapping[str, Any]) -> Any:
    raw = event.get("body")
    if raw is None:
        return None
    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw).decode("utf-8")
        return json.loads(raw)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError):
        return None


def lambda_handler(event: Mapping[str, Any], context: Any) -> Dict[str, Any]:
    method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method")
    if method == "OPTIONS":
        return response(200, None)

    checker = get_existence_checker()
    try:
        result = checker.check(_parse_body(event))
    except CheckError as e:
        return response(e.status_code, {"detail": e.to_detail()})
    return response(200, result.model_dump(by_alias=True))
