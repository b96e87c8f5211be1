"""
Shared EventBridge bus

Booking publishes ticket events here; Payment publishes payment events and
subscribes to the ticket events it cares about.
"""

from aws_cdk import CfnOutput, Stack, aws_events as events
from constructs import Construct


class SharedEventBusStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        event_bus_name: str = 'travier-event-bus',
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.event_bus = events.EventBus(self, 'TravierEventBus', event_bus_name=event_bus_name)

        CfnOutput(
            self,
            'EventBusName',
            value=self.event_bus.event_bus_name,
            description='Shared EventBridge bus for the booking and payment contexts',
            export_name='TravierEventBusName',
        )
        CfnOutput(
            self,
            'EventBusArn',
            value=self.event_bus.event_bus_arn,
            export_name='TravierEventBusArn',
        )
