import json
from typing import Any
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from ...api.deps import get_existence_checker
from ...core.exceptions import CheckError
from ...schemas.users import CheckUserExistsOut
from ...services.existence_checker import ExistenceChecker

router = APIRouter(prefix="/auth", tags=["auth"])


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


@router.post("/check-user-exists", response_model=CheckUserExistsOut)
async def check_user_exists(
    request: Request,
    checker: ExistenceChecker = Depends(get_existence_checker),
):
    """
    POST /auth/check-user-exists
    Body: { "email": "user@example.com" }
    Returns: { "exists": true, "uid": "...", "name": ..., "photoUrl": ... }
             or { "exists": false }
    Errors:  400 { "detail": { "code": "invalid-argument", "message": ... } }
             500 { "detail": { "code": "internal", "message": ... } }
    """
    payload = await _read_json(request)
    try:
        # boto3 blocks; keep it off the event loop
        return await run_in_threadpool(checker.check, payload)
    except CheckError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail()) from e
