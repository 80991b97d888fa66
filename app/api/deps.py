# backend/app/api/deps.py
from functools import lru_cache
from ..services.cognito_service import CognitoService
from ..services.existence_checker import ExistenceChecker, IdentityDirectory


@lru_cache(maxsize=1)
def get_identity_directory() -> CognitoService:
    # one directory (and boto3 client) per process
    return CognitoService()


def get_existence_checker() -> ExistenceChecker:
    directory: IdentityDirectory = get_identity_directory()
    return ExistenceChecker(directory)
