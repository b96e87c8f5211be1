"""
Payment Service Stack

- Payments table (pk paymentId) with TicketIdIndex
- Lambdas: process payment, issue refund, and two booking-event listeners
- REST API: POST /payment/process, /payment/refund
- EventBridge rules routing TicketReserved / TicketCancelled from the
  booking context to the listeners
"""

from typing import Any, Dict

from aws_cdk import (
    CfnOutput,
    Stack,
    aws_apigateway as apigateway,
    aws_dynamodb as dynamodb,
    aws_events as events,
    aws_events_targets as targets,
)
from constructs import Construct

from .python_lambda import PythonLambdaFactory, removal_policy_from_config


HANDLER_MODULE = 'src.service.payment.driving_adapter.lambda_handler'
BOOKING_EVENT_SOURCE = 'com.travier.booking'


class PaymentServiceStack(Stack):
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
        self.payments_table = dynamodb.Table(
            self,
            'PaymentsTable',
            table_name='Payments',
            partition_key=dynamodb.Attribute(name='paymentId', type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=removal_policy_from_config(config),
        )
        self.payments_table.add_global_secondary_index(
            index_name='TicketIdIndex',
            partition_key=dynamodb.Attribute(name='ticketId', type=dynamodb.AttributeType.STRING),
            projection_type=dynamodb.ProjectionType.ALL,
        )

        # ============= Lambda =============
        factory = PythonLambdaFactory(self, config=config)
        environment = {
            'PAYMENTS_TABLE_NAME': self.payments_table.table_name,
            'EVENT_BUS_NAME': event_bus.event_bus_name,
        }

        self.process_payment_function = factory.create(
            'ProcessPaymentFunction',
            function_name='ProcessPayment',
            handler=f'{HANDLER_MODULE}.payment_handler.process_payment',
            environment=environment,
            service_name='payment-service',
        )
        self.issue_refund_function = factory.create(
            'IssueRefundFunction',
            function_name='IssueRefund',
            handler=f'{HANDLER_MODULE}.payment_handler.issue_refund',
            environment=environment,
            service_name='payment-service',
        )
        for function in (self.process_payment_function, self.issue_refund_function):
            self.payments_table.grant_read_write_data(function)
            event_bus.grant_put_events_to(function)

        # Listeners only log; no table or bus access
        self.ticket_reserved_listener = factory.create(
            'TicketReservedListenerFunction',
            function_name='PaymentTicketReservedListener',
            handler=f'{HANDLER_MODULE}.booking_event_listener.log_ticket_reserved',
            environment={},
            service_name='payment-service',
        )
        self.ticket_cancelled_listener = factory.create(
            'TicketCancelledListenerFunction',
            function_name='PaymentTicketCancelledListener',
            handler=f'{HANDLER_MODULE}.booking_event_listener.log_ticket_cancelled',
            environment={},
            service_name='payment-service',
        )

        # ============= EventBridge rules =============
        events.Rule(
            self,
            'TicketReservedRule',
            event_bus=event_bus,
            event_pattern=events.EventPattern(
                source=[BOOKING_EVENT_SOURCE], detail_type=['TicketReserved']
            ),
            description='Route TicketReserved events to the payment context',
            targets=[targets.LambdaFunction(self.ticket_reserved_listener)],
        )
        events.Rule(
            self,
            'TicketCancelledRule',
            event_bus=event_bus,
            event_pattern=events.EventPattern(
                source=[BOOKING_EVENT_SOURCE], detail_type=['TicketCancelled']
            ),
            description='Route TicketCancelled events to the payment context',
            targets=[targets.LambdaFunction(self.ticket_cancelled_listener)],
        )

        # ============= API Gateway =============
        api = apigateway.RestApi(
            self,
            'PaymentApi',
            rest_api_name='Payment Service',
            description='API for the Payment bounded context',
            deploy_options=apigateway.StageOptions(stage_name=config['api']['stage_name']),
        )
        payment_resource = api.root.add_resource('payment')
        payment_resource.add_resource('process').add_method(
            'POST', apigateway.LambdaIntegration(self.process_payment_function)
        )
        payment_resource.add_resource('refund').add_method(
            'POST', apigateway.LambdaIntegration(self.issue_refund_function)
        )

        CfnOutput(
            self,
            'PaymentApiUrl',
            value=api.url,
            description='The URL of the Payment API',
            export_name='PaymentApiUrl',
        )
