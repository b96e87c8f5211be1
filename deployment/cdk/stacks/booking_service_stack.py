"""
Booking Service Stack

- Tickets table (pk ticketId) with FlightIdIndex and PassengerIdIndex
- One Lambda per use case: reserve, check-in, cancel
- REST API: POST /booking/reserve, /booking/check-in, /booking/cancel
"""

from typing import Any, Dict

from aws_cdk import (
    CfnOutput,
    Stack,
    aws_apigateway as apigateway,
    aws_dynamodb as dynamodb,
    aws_events as events,
)
from constructs import Construct

from .python_lambda import PythonLambdaFactory, removal_policy_from_config


HANDLER_MODULE = 'src.service.booking.driving_adapter.lambda_handler.ticket_handler'


class BookingServiceStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        event_bus: events.IEventBus,
        config: Dict[str, Any],
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # ============= DynamoDB =============
        self.tickets_table = dynamodb.Table(
            self,
            'TicketsTable',
            table_name='Tickets',
            partition_key=dynamodb.Attribute(name='ticketId', type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=removal_policy_from_config(config),
        )
        for index_name, key in (('FlightIdIndex', 'flightId'), ('PassengerIdIndex', 'passengerId')):
            self.tickets_table.add_global_secondary_index(
                index_name=index_name,
                partition_key=dynamodb.Attribute(name=key, type=dynamodb.AttributeType.STRING),
                projection_type=dynamodb.ProjectionType.ALL,
            )

        # ============= Lambda =============
        factory = PythonLambdaFactory(self, config=config)
        environment = {
            'TICKETS_TABLE_NAME': self.tickets_table.table_name,
            'EVENT_BUS_NAME': event_bus.event_bus_name,
        }
        self.functions = {}
        for construct_id_, function_name, handler_name in (
            ('ReserveTicketFunction', 'ReserveTicket', 'reserve_ticket'),
            ('CheckInTicketFunction', 'CheckInTicket', 'check_in_ticket'),
            ('CancelTicketFunction', 'CancelTicket', 'cancel_ticket'),
        ):
            function = factory.create(
                construct_id_,
                function_name=function_name,
                handler=f'{HANDLER_MODULE}.{handler_name}',
                environment=environment,
                service_name='booking-service',
            )
            self.tickets_table.grant_read_write_data(function)
            event_bus.grant_put_events_to(function)
            self.functions[handler_name] = function

        # ============= API Gateway =============
        api = apigateway.RestApi(
            self,
            'BookingApi',
            rest_api_name='Booking Service',
            description='API for the Booking bounded context',
            deploy_options=apigateway.StageOptions(stage_name=config['api']['stage_name']),
        )
        booking_resource = api.root.add_resource('booking')
        for path, handler_name in (
            ('reserve', 'reserve_ticket'),
            ('check-in', 'check_in_ticket'),
            ('cancel', 'cancel_ticket'),
        ):
            booking_resource.add_resource(path).add_method(
                'POST', apigateway.LambdaIntegration(self.functions[handler_name])
            )

        CfnOutput(
            self,
            'BookingApiUrl',
            value=api.url,
            description='The URL of the Booking API',
            export_name='BookingApiUrl',
        )
