from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.payment.app.dto.payment_dto import PaymentResponse
from src.service.payment.app.interface.i_payment_repo import IPaymentRepo
from src.service.payment.domain.service.payment_service import PaymentService
from src.service.shared_kernel.app.interface.i_event_publisher import IEventPublisher


class IssueRefundUseCase:
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
    async def execute(self, *, payment_id: str, reason: str) -> PaymentResponse:
        payment = await self.payment_repo.get_by_id(payment_id=payment_id)
        if not payment:
            raise NotFoundError(f'Payment with ID {payment_id} not found')

        payment = self.payment_service.refund_payment(payment=payment, reason=reason)

        await self.payment_repo.save(payment=payment)
        await self.event_publisher.publish_all(events=payment.get_events())
        payment = payment.clear_events()

        Logger.base.info(f'↩️ [PAYMENT] Refunded payment {payment_id}: {reason}')
        return PaymentResponse.from_payment(payment=payment)
