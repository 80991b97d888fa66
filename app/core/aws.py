import logging
import threading

import boto3
from .config import settings

log = logging.getLogger(__name__)


class AwsSessionFactory:
    """
    Lazy session factory. It does NOT create any service clients itself.
    Each service class asks for the session when it needs to initialize
    its own client.
    """
    _session = None
    _lock = threading.Lock()

    @classmethod
    def get_session(cls) -> boto3.Session:
        if cls._session is None:
            with cls._lock:
                if cls._session is None:
                    cls._session = boto3.Session(region_name=settings.aws_region)
                    log.debug("Created AWS session (region=%s)", cls._session.region_name)
        return cls._session
