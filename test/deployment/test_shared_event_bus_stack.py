"""
CDK Stack Unit Tests for the shared EventBridge bus

Run with: pytest test/deployment/test_shared_event_bus_stack.py -v
"""

import aws_cdk.assertions as assertions
import pytest


@pytest.mark.cdk
def test_event_bus_created(event_bus_stack):
    template = assertions.Template.from_stack(event_bus_stack)

    template.resource_count_is('AWS::Events::EventBus', 1)
    template.has_resource_properties('AWS::Events::EventBus', {'Name': 'travier-event-bus'})
    template.has_output('EventBusName', {'Export': {'Name': 'TravierEventBusName'}})
