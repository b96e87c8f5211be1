"""Shared fixtures for the CDK stack tests: one app, one bus, development config."""

from pathlib import Path

import aws_cdk as cdk
import pytest
import yaml

from deployment.cdk.stacks.shared_event_bus_stack import SharedEventBusStack


CONFIG_PATH = Path(__file__).resolve().parents[2] / 'deployment' / 'config.yml'


@pytest.fixture
def deploy_config():
    with open(CONFIG_PATH) as f:
        return yaml.safe_load(f)['development']


@pytest.fixture
def cdk_env():
    # Cross-stack references need every stack in the same account/region
    return cdk.Environment(account='123456789012', region='us-east-1')


@pytest.fixture
def cdk_app():
    return cdk.App()


@pytest.fixture
def event_bus_stack(cdk_app, cdk_env, deploy_config):
    return SharedEventBusStack(
        cdk_app,
        'TestSharedEventBusStack',
        event_bus_name=deploy_config['event_bus_name'],
        env=cdk_env,
    )
