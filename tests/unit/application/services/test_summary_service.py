# nosec B101


from datetime import date
from unittest.mock import AsyncMock, Mock

import pytest

from application.services.summary_service import SummaryService
from domain.exceptions.rates import InvalidDateFormatError, InvalidRangeError, RatesUnavailableError
from domain.models.rates import DayRecord, SummaryMode


GAP_PAYLOAD = {
    'amount': 1.0,
    'base': 'EUR',
    'rates': {
        '2024-01-03': {'USD': 1.12},
        '2024-01-01': {'USD': 1.10},
    },
}


@pytest.fixture
def fetcher():
    mock_fetcher = Mock()
    mock_fetcher.fetch = AsyncMock(return_value=GAP_PAYLOAD)
    return mock_fetcher


@pytest.fixture
def service(fetcher):
    return SummaryService(fetcher=fetcher, from_currency='EUR', to_currency='USD')


@pytest.mark.asyncio
async def test_gap_example_end_to_end(service, fetcher):
    result = await service.get_summary('2024-01-01', '2024-01-03')

    assert result.days == [
        DayRecord(date='2024-01-01', rate=1.10, pct_change=None),
        DayRecord(date='2024-01-02', rate=None, pct_change=None),
        DayRecord(date='2024-01-03', rate=1.12, pct_change=None),
    ]
    assert result.summary.start_rate == 1.10
    assert result.summary.end_rate == 1.12
    assert result.summary.total_pct_change == pytest.approx(1.818, abs=1e-3)
    assert result.summary.mean_rate == pytest.approx(1.11)
    fetcher.fetch.assert_awaited_once_with(date(2024, 1, 1), date(2024, 1, 3), 'EUR', 'USD')


@pytest.mark.asyncio
async def test_mode_none_drops_days_but_keeps_summary(service):
    result = await service.get_summary('2024-01-01', '2024-01-03', SummaryMode.NONE)

    assert result.days == []
    assert result.summary.start_rate == 1.10
    assert result.summary.mean_rate == pytest.approx(1.11)


@pytest.mark.asyncio
async def test_start_after_end_is_invalid_range(service, fetcher):
    with pytest.raises(InvalidRangeError) as exc_info:
        await service.get_summary('2024-01-05', '2024-01-01')

    assert str(exc_info.value) == 'start must be <= end'
    fetcher.fetch.assert_not_awaited()


@pytest.mark.parametrize('start, end', [
    ('2024-13-01', '2024-01-02'),
    ('2024-01-01', 'tomorrow'),
    ('', '2024-01-02'),
    ('2024-02-30', '2024-03-01'),
])
@pytest.mark.asyncio
async def test_unparseable_dates_are_invalid_format(service, fetcher, start, end):
    with pytest.raises(InvalidDateFormatError) as exc_info:
        await service.get_summary(start, end)

    assert 'YYYY-MM-DD' in str(exc_info.value)
    fetcher.fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_same_start_and_end_gives_single_day(service, fetcher):
    fetcher.fetch.return_value = {'rates': {'2024-01-01': {'USD': 1.1}}}

    result = await service.get_summary('2024-01-01', '2024-01-01')

    assert len(result.days) == 1
    assert result.days[0].pct_change is None
    assert result.summary.total_pct_change == 0.0


@pytest.mark.asyncio
async def test_malformed_payload_gives_empty_series(service, fetcher):
    fetcher.fetch.return_value = {'unexpected': 'shape'}

    result = await service.get_summary('2024-01-01', '2024-01-02')

    assert [d.rate for d in result.days] == [None, None]
    assert result.summary.start_rate is None
    assert result.summary.end_rate is None
    assert result.summary.total_pct_change is None
    assert result.summary.mean_rate is None


@pytest.mark.asyncio
async def test_fetch_errors_propagate(service, fetcher):
    fetcher.fetch.side_effect = RatesUnavailableError(Exception('api'), Exception('file'))

    with pytest.raises(RatesUnavailableError):
        await service.get_summary('2024-01-01', '2024-01-02')


@pytest.mark.asyncio
async def test_range_ending_on_last_representable_date(service, fetcher):
    fetcher.fetch.return_value = {'rates': {'9999-12-30': {'USD': 1.0}, '9999-12-31': {'USD': 1.1}}}

    result = await service.get_summary('9999-12-30', '9999-12-31')

    assert [d.date for d in result.days] == ['9999-12-30', '9999-12-31']
    assert result.days[1].pct_change == pytest.approx(10.0)
    assert result.summary.total_pct_change == pytest.approx(10.0)
