"""
Service context for log lines.

Every record carries `<service>@<env>:<pid>` so that output from several
uvicorn workers behind one load balancer can be told apart.
"""

import os
from functools import lru_cache

from src.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    return f'{settings.SERVICE_NAME}@{settings.DEPLOY_ENV}:{os.getpid()}'
