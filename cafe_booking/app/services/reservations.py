import asyncio
import enum
import logging
from datetime import date, datetime
from typing import Awaitable, Callable
from uuid import uuid4

from cafe_booking.app.core.config import Settings
from cafe_booking.app.services import validation
from cafe_booking.app.services.dates import booking_window, is_weekend, parse_date
from cafe_booking.app.services.events import DATE_CHANGE, READY, SUBMIT, EventSource
from cafe_booking.app.services.request import FORM_FIELDS, TRIMMED_FIELDS, ReservationRequest
from cafe_booking.app.services.transport import ReservationTransport, ReservationTransportError
from cafe_booking.app.services.view import ERROR, SUCCESS, FormView

logger = logging.getLogger(__name__)

SUBMIT_LABEL = "Reserve"
SUBMITTING_LABEL = "Submitting..."

WEEKEND_CLOSED = "Weekends are closed. Please choose a weekday."
INVALID_DATE = "Please choose a valid reservation date."
DATE_OUT_OF_RANGE = "Please choose a date between {earliest} and {latest}."
UNOFFERED_TIME = "Please select one of the offered reservation times."
PARTY_SIZE_OUT_OF_RANGE = "Please select a party size between 1 and {largest}."
DISPATCH_FAILED = "Something went wrong with your reservation. Please try again shortly."
EMAIL_CONFIRMATION_NOTE = "A confirmation will be sent by email."


class SubmitStatus(enum.Enum):
    INVALID = "invalid"
    BUSY = "busy"
    SIMULATED = "simulated"
    SENT = "sent"
    FAILED = "failed"


def format_confirmation(request: ReservationRequest, email_note: bool = False) -> str:
    lines = [
        "Your reservation is complete!",
        f"Reservation details for {request.name}:",
        f"Date: {request.date}",
        f"Time: {request.time}",
        f"Party size: {request.people}",
    ]
    if email_note:
        lines += ["", EMAIL_CONFIRMATION_NOTE]
    return "\n".join(lines)


class ReservationFormController:
    """
    Drives the reservation form: date constraints, validation, dispatch and feedback.

    The controller owns no display state of its own. Field values, the submit
    control and the message region all live behind ``view``; outbound delivery
    goes through ``transport`` unless the endpoint is unconfigured, in which
    case submissions are simulated (dry-run mode).
    """

    def __init__(
        self,
        view: FormView,
        settings: Settings,
        transport: ReservationTransport | None = None,
        *,
        today: Callable[[], date] = date.today,
        now: Callable[[], datetime] = datetime.now,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        auto_hide: bool = True,
    ) -> None:
        if transport is None and not settings.dry_run:
            raise ValueError("A transport is required when APPS_SCRIPT_URL is configured")
        self._view = view
        self._settings = settings
        self._transport = transport
        self._today = today
        self._now = now
        self._sleep = sleep
        self._auto_hide = auto_hide
        self._submitting = False
        self._hide_handle: asyncio.TimerHandle | None = None

    @property
    def dry_run(self) -> bool:
        return self._settings.dry_run

    @property
    def submitting(self) -> bool:
        return self._submitting

    def bind(self, events: EventSource) -> None:
        """Register the controller's handlers on an event source."""
        events.on(READY, self.initialize)
        events.on(DATE_CHANGE, self.on_date_change)
        events.on(SUBMIT, self.on_submit)

    def booking_window(self) -> tuple[date, date]:
        return booking_window(self._today(), self._settings.BOOKING_WINDOW_MONTHS)

    async def initialize(self) -> None:
        earliest, latest = self.booking_window()
        self._view.set_date_bounds(earliest, latest)
        self._view.set_submit_state(True, SUBMIT_LABEL)
        logger.debug(
            "%s reservation form ready (%s to %s, dry_run=%s)",
            self._settings.CAFE_NAME,
            earliest,
            latest,
            self.dry_run,
        )

    async def on_date_change(self) -> bool:
        """Check the selected date, clearing it when it cannot be booked."""
        value = self._view.get_value("date")
        if not value:
            return False

        day = parse_date(value)
        if day is None:
            return self._reject_date(INVALID_DATE)

        earliest, latest = self.booking_window()
        if not earliest <= day <= latest:
            return self._reject_date(
                DATE_OUT_OF_RANGE.format(earliest=earliest.isoformat(), latest=latest.isoformat())
            )

        if is_weekend(day):
            return self._reject_date(WEEKEND_CLOSED)

        return True

    def _reject_date(self, message: str) -> bool:
        self.show_message(message, ERROR)
        self._view.set_value("date", "")
        return False

    def collect(self) -> ReservationRequest:
        """Build a fresh request from the current form values."""
        values = {}
        for field in FORM_FIELDS:
            value = self._view.get_value(field)
            values[field] = value.strip() if field in TRIMMED_FIELDS else value
        values["timestamp"] = self._now().strftime(self._settings.TIMESTAMP_FORMAT)
        return ReservationRequest(**values)

    def validate_form(self, request: ReservationRequest) -> bool:
        result = validation.validate_form(request)
        if not result.ok:
            self.show_message(result.message, ERROR)
        return result.ok

    def check_offered_options(self, request: ReservationRequest) -> bool:
        """Reject a time or party size the form does not offer."""
        if request.time not in self._settings.TIME_SLOTS:
            self.show_message(UNOFFERED_TIME, ERROR)
            return False

        largest = self._settings.MAX_PARTY_SIZE
        if not request.people.isdecimal() or not 1 <= int(request.people) <= largest:
            self.show_message(PARTY_SIZE_OUT_OF_RANGE.format(largest=largest), ERROR)
            return False

        return True

    async def on_submit(self) -> SubmitStatus:
        if self._submitting:
            logger.info("Submission already in progress; ignoring submit")
            return SubmitStatus.BUSY

        request = self.collect()
        if request.date and not await self.on_date_change():
            return SubmitStatus.INVALID
        if not self.validate_form(request):
            return SubmitStatus.INVALID
        if not self.check_offered_options(request):
            return SubmitStatus.INVALID

        return await self.submit_reservation(request)

    async def submit_reservation(self, request: ReservationRequest) -> SubmitStatus:
        submission_id = uuid4().hex[:8]
        self._submitting = True
        self._view.set_submit_state(False, SUBMITTING_LABEL)
        try:
            if self.dry_run:
                logger.info("Dry-run reservation %s for %s %s", submission_id, request.date, request.time)
                await self._sleep(self._settings.DRY_RUN_DELAY_SECONDS)
                self.show_message(format_confirmation(request), SUCCESS)
                self._view.reset()
                return SubmitStatus.SIMULATED

            await self._transport.send_without_confirmation(request.payload())
            # The sink gives no receipt, so a clean dispatch is reported as success.
            self.show_message(format_confirmation(request, email_note=True), SUCCESS)
            self._view.reset()
            return SubmitStatus.SENT
        except ReservationTransportError:
            logger.exception(
                "Reservation %s for %s %s could not be dispatched", submission_id, request.date, request.time
            )
            self.show_message(DISPATCH_FAILED, ERROR)
            return SubmitStatus.FAILED
        finally:
            self._submitting = False
            self._view.set_submit_state(True, SUBMIT_LABEL)

    def show_message(self, body: str, kind: str) -> None:
        if self._hide_handle is not None:
            self._hide_handle.cancel()
            self._hide_handle = None

        self._view.show_message(body, kind)
        self._view.scroll_to_message()

        if kind == SUCCESS and self._auto_hide:
            loop = asyncio.get_running_loop()
            self._hide_handle = loop.call_later(
                self._settings.SUCCESS_MESSAGE_TTL_SECONDS, self._view.hide_message
            )
