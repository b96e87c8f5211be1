"""
Service context extraction for distributed logging.

Identifies the emitting function instance so that interleaved Lambda
invocations can be told apart in CloudWatch.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME') or os.getenv('AWS_LAMBDA_FUNCTION_NAME', 'unknown')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Log stream name looks like: 2024/01/01/[$LATEST]0123456789abcdef...
    log_stream = os.getenv('AWS_LAMBDA_LOG_STREAM_NAME', '')
    if log_stream:
        instance_id = log_stream.rsplit(']', 1)[-1][:8] or 'lambda'
    else:
        # Use PID for local development
        instance_id = str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
