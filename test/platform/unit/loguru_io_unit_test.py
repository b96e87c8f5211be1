import pytest

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import call_depth_var, chain_start_time_var
from src.platform.logging.loguru_io_utils import mask_sensitive, render_content, truncate_content


@pytest.mark.unit
class TestLoggerIO:
    def test_sync_function_returns_value(self) -> None:
        @Logger.io
        def add(a: int, b: int) -> int:
            return a + b

        assert add(1, 2) == 3
        assert call_depth_var.get() == 0
        assert chain_start_time_var.get() == 0

    @pytest.mark.asyncio
    async def test_async_function_reraises_after_logging_once(self) -> None:
        @Logger.io
        async def lookup(*, ticket_id: str) -> None:
            raise NotFoundError(f'Ticket with ID {ticket_id} not found')

        @Logger.io
        async def outer() -> None:
            await lookup(ticket_id='t1')

        with pytest.raises(NotFoundError) as exc_info:
            await outer()

        assert exc_info.value._has_logged is True  # type: ignore[attr-defined]
        assert call_depth_var.get() == 0

    def test_lines_reach_stdout_before_the_call_returns(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        Logger.base.info('📤 [PUBLISH] flushed')

        assert '📤 [PUBLISH] flushed' in capsys.readouterr().out

    def test_error_line_is_written_synchronously(self, capsys: pytest.CaptureFixture[str]) -> None:
        @Logger.io
        def explode() -> None:
            raise NotFoundError('Payment with ID p1 not found')

        with pytest.raises(NotFoundError):
            explode()

        assert 'NotFoundError: Payment with ID p1 not found' in capsys.readouterr().out


@pytest.mark.unit
class TestMasking:
    def test_masks_card_number_in_repr(self) -> None:
        assert mask_sensitive("card_number='4111111111111111'") == "card_number='********'"

    def test_masks_keys_inside_kwargs(self) -> None:
        assert render_content({'password': 'hunter2'}) == "{'password': '********'}"

    def test_leaves_plain_values_untouched(self) -> None:
        value = {'ticketId': 't1'}

        assert mask_sensitive(value) is value

    def test_truncates_long_content(self) -> None:
        result = truncate_content('x' * 1500)

        assert result.startswith('x' * 1000)
        assert result.endswith('(truncated 1500 chars)')
