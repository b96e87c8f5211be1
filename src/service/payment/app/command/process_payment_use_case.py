"""
Process Payment Use Case

1. Create a PENDING payment and complete it (records PaymentProcessed)
2. Save it
3. Publish the pending events, then drop them

Any failure along the way is recorded durably: a separate FAILED payment
for the same request is saved with the error text as its reason, and the
original error is re-raised to the caller.
"""

from decimal import Decimal

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.payment.app.dto.payment_dto import PaymentResponse
from src.service.payment.app.interface.i_payment_repo import IPaymentRepo
from src.service.payment.domain.enum.payment_method import PaymentMethod
from src.service.payment.domain.service.payment_service import PaymentService
from src.service.shared_kernel.app.interface.i_event_publisher import IEventPublisher


class ProcessPaymentUseCase:
    def __init__(
        self,
        *,
        payment_service: PaymentService,
        payment_repo: IPaymentRepo,
        event_publisher: IEventPublisher,
    ) -> None:
        self.payment_service = payment_service
        self.payment_repo = payment_repo
        self.event_publisher = event_publisher

    @Logger.io
    async def execute(
        self,
        *,
        ticket_id: str,
        amount: Decimal | int | float | str,
        currency: str,
        payment_method: PaymentMethod | str,
    ) -> PaymentResponse:
        try:
            payment = self.payment_service.create_payment(
                ticket_id=ticket_id,
                amount=amount,
                currency=currency,
                payment_method=payment_method,
            )
            payment = self.payment_service.process_payment(payment=payment)

            await self.payment_repo.save(payment=payment)
            await self.event_publisher.publish_all(events=payment.get_events())
            payment = payment.clear_events()
        except Exception as e:
            await self._record_failed_payment(
                ticket_id=ticket_id,
                amount=amount,
                currency=currency,
                payment_method=payment_method,
                reason=str(e),
            )
            raise

        Logger.base.info(
            f'💳 [PAYMENT] Completed payment {payment.payment_id} for ticket {ticket_id}'
        )
        return PaymentResponse.from_payment(payment=payment)

    async def _record_failed_payment(
        self,
        *,
        ticket_id: str,
        amount: Decimal | int | float | str,
        currency: str,
        payment_method: PaymentMethod | str,
        reason: str,
    ) -> None:
        try:
            failed = self.payment_service.create_payment(
                ticket_id=ticket_id,
                amount=amount,
                currency=currency,
                payment_method=payment_method,
            )
        except ValidationError:
            Logger.base.warning(
                f'⚠️ [PAYMENT] Request for ticket {ticket_id} is not a valid payment, '
                f'nothing to record: {reason}'
            )
            return

        failed = self.payment_service.fail_payment(payment=failed, reason=reason)
        await self.payment_repo.save(payment=failed)
        Logger.base.warning(
            f'❌ [PAYMENT] Recorded failed payment {failed.payment_id} for ticket {ticket_id}: {reason}'
        )
