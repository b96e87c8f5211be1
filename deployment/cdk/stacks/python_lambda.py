"""
Python Lambda construct helper

All functions ship the same asset (the project root, minus tests and
tooling) and differ only by handler path and environment.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from aws_cdk import Duration, RemovalPolicy, aws_lambda as lambda_
from constructs import Construct


PROJECT_ROOT = Path(__file__).resolve().parents[3]

ASSET_EXCLUDES = [
    '.git',
    '.venv',
    '**/__pycache__',
    '**/*.pyc',
    '.pytest_cache',
    'cdk.out',
    'deployment',
    'test',
    'logs',
    '*.md',
    '.env',
]

_RUNTIMES = {
    'python3.11': lambda_.Runtime.PYTHON_3_11,
    'python3.12': lambda_.Runtime.PYTHON_3_12,
    'python3.13': lambda_.Runtime.PYTHON_3_13,
}


def removal_policy_from_config(config: Dict[str, Any]) -> RemovalPolicy:
    policy = config.get('dynamodb', {}).get('removal_policy', 'retain')
    return RemovalPolicy.DESTROY if policy == 'destroy' else RemovalPolicy.RETAIN


class PythonLambdaFactory:
    def __init__(self, scope: Construct, *, config: Dict[str, Any]) -> None:
        self.scope = scope
        lambda_config = config.get('lambda', {})
        self.runtime = _RUNTIMES[lambda_config.get('runtime', 'python3.12')]
        self.memory_size = lambda_config.get('memory_size', 512)
        self.timeout = Duration.seconds(lambda_config.get('timeout_seconds', 30))
        self.debug = bool(lambda_config.get('debug', False))
        self.code = lambda_.Code.from_asset(str(PROJECT_ROOT), exclude=ASSET_EXCLUDES)

        self.layers = []
        layer_arn: Optional[str] = lambda_config.get('dependency_layer_arn')
        if layer_arn:
            self.layers.append(
                lambda_.LayerVersion.from_layer_version_arn(scope, 'DependencyLayer', layer_arn)
            )

    def create(
        self,
        construct_id: str,
        *,
        function_name: str,
        handler: str,
        environment: Dict[str, str],
        service_name: str,
    ) -> lambda_.Function:
        return lambda_.Function(
            self.scope,
            construct_id,
            function_name=function_name,
            runtime=self.runtime,
            code=self.code,
            handler=handler,
            memory_size=self.memory_size,
            timeout=self.timeout,
            layers=self.layers,
            environment={
                'SERVICE_NAME': service_name,
                'DEBUG': 'true' if self.debug else 'false',
                **environment,
            },
        )
