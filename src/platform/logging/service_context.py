"""
Service context extraction for logging.

Identifies the running process in log lines: <SERVICE_NAME>@<DEPLOY_ENV>:<pid>
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'ticket-purchase')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{service_name}@{deploy_env}:{os.getpid()}'
