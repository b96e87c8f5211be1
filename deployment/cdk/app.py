#!/usr/bin/env python3
"""
AWS CDK App for the Travier booking and payment services

Run from deployment/cdk:  DEPLOY_ENV=production cdk deploy --all
"""

import os
from pathlib import Path

import aws_cdk as cdk
from stacks.booking_service_stack import BookingServiceStack
from stacks.payment_service_stack import PaymentServiceStack
from stacks.shared_event_bus_stack import SharedEventBusStack
import yaml


app = cdk.App()

# ============= Load Configuration from YAML =============
config_path = Path(__file__).parent.parent / 'config.yml'
with open(config_path) as f:
    all_config = yaml.safe_load(f)

deploy_env = os.getenv('DEPLOY_ENV', 'development')
config = all_config[deploy_env]

print(f'📋 Loading configuration for environment: {deploy_env}')
print(f'   Region: {config["region"]}')
print(f'   Lambda: {config["lambda"]["runtime"]}, {config["lambda"]["memory_size"]} MB')

env = cdk.Environment(
    account=os.getenv('CDK_DEFAULT_ACCOUNT'),
    region=os.getenv('CDK_DEFAULT_REGION', config['region']),
)

# 1. Shared event bus
event_bus_stack = SharedEventBusStack(
    app,
    'TravierSharedEventBusStack',
    event_bus_name=config['event_bus_name'],
    env=env,
    description='Shared EventBridge bus for Travier bounded contexts',
)

# 2. Booking context
booking_stack = BookingServiceStack(
    app,
    'TravierBookingStack',
    event_bus=event_bus_stack.event_bus,
    config=config,
    env=env,
    description='Booking bounded context: Tickets table, Lambdas and REST API',
)
booking_stack.add_dependency(event_bus_stack)

# 3. Payment context
payment_stack = PaymentServiceStack(
    app,
    'TravierPaymentStack',
    event_bus=event_bus_stack.event_bus,
    config=config,
    env=env,
    description='Payment bounded context: Payments table, Lambdas, REST API and booking rules',
)
payment_stack.add_dependency(event_bus_stack)

app.synth()
