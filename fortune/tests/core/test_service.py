"""Unit tests for the FortuneService orchestrator."""

import asyncio

import pytest

from fortune.core.errors import (
    HttpStatusFailure,
    InputValidationFailure,
    RequestInFlightError,
    TransportFailure,
    Unclassified,
)
from fortune.core.models import CalendarDate
from fortune.core.service import FortuneOutcome, FortuneService, ServiceState
from fortune.tests.fakes import FakeFortuneGatewayPort

BIRTHDAY = CalendarDate(year=2000, month=1, day=27)
TODAY = CalendarDate(year=2023, month=5, day=5)


@pytest.fixture
def gateway() -> FakeFortuneGatewayPort:
    """Create a fake gateway returning the default prefecture."""
    return FakeFortuneGatewayPort()


@pytest.fixture
def service(gateway: FakeFortuneGatewayPort) -> FortuneService:
    """Create a FortuneService wired to the fake gateway."""
    return FortuneService(gateway=gateway)


@pytest.mark.asyncio
class TestExecute:
    """Tests for the validate → send → outcome flow."""

    async def test_success_returns_prefecture(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        prefecture = await service.execute("ゆめみん", BIRTHDAY, "ab", TODAY)

        assert prefecture == gateway.prefecture
        assert service.state == ServiceState.SUCCEEDED
        assert not service.in_flight

    async def test_request_is_built_from_inputs(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        await service.execute("ゆめみん", BIRTHDAY, "AB", TODAY)

        assert len(gateway.requests) == 1
        request = gateway.requests[0]
        assert request.name == "ゆめみん"
        assert request.birthday == BIRTHDAY
        assert request.blood_type == "AB"
        assert request.today == TODAY

    async def test_today_defaults_to_current_date(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        await service.execute("ゆめみん", BIRTHDAY, "a")

        assert gateway.requests[0].today == CalendarDate.today()

    async def test_empty_name_never_reaches_gateway(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        with pytest.raises(InputValidationFailure) as exc_info:
            await service.execute("", BIRTHDAY, "a", TODAY)

        assert exc_info.value.reason == "name must not be empty"
        assert gateway.requests == []
        assert service.state == ServiceState.FAILED

    @pytest.mark.parametrize(
        ("birthday", "blood_type", "today", "reason"),
        [
            (BIRTHDAY, "x", TODAY, "blood type"),
            (CalendarDate(year=2000, month=2, day=30), "a", TODAY, "birthday"),
            (BIRTHDAY, "a", CalendarDate(year=2023, month=2, day=29), "today"),
            (CalendarDate(year=2024, month=1, day=1), "a", TODAY, "after today"),
        ],
    )
    async def test_validation_reasons(
        self,
        service: FortuneService,
        gateway: FakeFortuneGatewayPort,
        birthday: CalendarDate,
        blood_type: str,
        today: CalendarDate,
        reason: str,
    ) -> None:
        with pytest.raises(InputValidationFailure) as exc_info:
            await service.execute("ゆめみん", birthday, blood_type, today)

        assert reason in exc_info.value.reason
        assert gateway.requests == []

    async def test_classified_gateway_error_propagates_unchanged(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        gateway.should_fail = True
        gateway.error = HttpStatusFailure(404)

        with pytest.raises(HttpStatusFailure) as exc_info:
            await service.execute("ゆめみん", BIRTHDAY, "a", TODAY)

        assert exc_info.value is gateway.error
        assert service.state == ServiceState.FAILED

    async def test_unexpected_gateway_error_is_unclassified(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        gateway.should_fail = True
        gateway.error = KeyError("broken invariant")

        with pytest.raises(Unclassified) as exc_info:
            await service.execute("ゆめみん", BIRTHDAY, "a", TODAY)

        assert exc_info.value.cause is gateway.error
        assert exc_info.value.__cause__ is gateway.error

    async def test_service_is_reusable_after_failure(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        with pytest.raises(InputValidationFailure):
            await service.execute("", BIRTHDAY, "a", TODAY)

        prefecture = await service.execute("ゆめみん", BIRTHDAY, "a", TODAY)
        assert prefecture == gateway.prefecture


@pytest.mark.asyncio
class TestInFlight:
    """Tests for the in-flight flag and re-entrancy policy."""

    async def test_in_flight_while_sending(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        release = gateway.hold()
        task = asyncio.create_task(service.execute("ゆめみん", BIRTHDAY, "a", TODAY))
        await asyncio.sleep(0)

        assert service.in_flight
        assert service.state == ServiceState.SENDING

        release.set()
        await task
        assert not service.in_flight

    async def test_second_call_rejected_while_in_flight(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        release = gateway.hold()
        task = asyncio.create_task(service.execute("ゆめみん", BIRTHDAY, "a", TODAY))
        await asyncio.sleep(0)

        with pytest.raises(RequestInFlightError):
            await service.execute("ゆめみん", BIRTHDAY, "a", TODAY)

        assert service.state == ServiceState.SENDING
        release.set()
        await task
        assert len(gateway.requests) == 1

    async def test_cancelled_lookup_releases_in_flight(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        gateway.hold()
        task = asyncio.create_task(service.execute("ゆめみん", BIRTHDAY, "a", TODAY))
        await asyncio.sleep(0)
        assert service.in_flight

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert not service.in_flight
        assert service.state == ServiceState.FAILED

        gateway.hold().set()
        prefecture = await service.execute("ゆめみん", BIRTHDAY, "a", TODAY)
        assert prefecture == gateway.prefecture


@pytest.mark.asyncio
class TestFetchFortune:
    """Tests for the value-returning collaborator API."""

    async def test_success_outcome(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        outcome = await service.fetch_fortune("ゆめみん", BIRTHDAY, "a", TODAY)

        assert outcome.succeeded
        assert outcome.prefecture == gateway.prefecture
        assert outcome.error is None

    async def test_failure_outcome(
        self, service: FortuneService, gateway: FakeFortuneGatewayPort
    ) -> None:
        gateway.should_fail = True
        gateway.error = TransportFailure(ConnectionError("offline"))

        outcome = await service.fetch_fortune("ゆめみん", BIRTHDAY, "a", TODAY)

        assert not outcome.succeeded
        assert outcome.prefecture is None
        assert isinstance(outcome.error, TransportFailure)


def test_outcome_requires_exactly_one_side() -> None:
    with pytest.raises(ValueError):
        FortuneOutcome()
    with pytest.raises(ValueError):
        FortuneOutcome(
            prefecture=FakeFortuneGatewayPort().prefecture,
            error=Unclassified(),
        )
