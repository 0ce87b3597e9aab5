from fastapi import APIRouter, Depends, HTTPException, status

from cafe_booking.app.core import http_client as http_module
from cafe_booking.app.core.config import Settings, get_settings
from cafe_booking.app.routers.schemas import (
    DateCheckIn,
    DateCheckOut,
    FormStateOut,
    ReservationFormIn,
    ReservationOptionsOut,
)
from cafe_booking.app.services.events import DATE_CHANGE, READY, SUBMIT, FormEventBus
from cafe_booking.app.services.reservations import ReservationFormController, SubmitStatus
from cafe_booking.app.services.transport import HttpxReservationTransport
from cafe_booking.app.services.view import SUCCESS, InMemoryFormView


router = APIRouter()


async def _open_form(view: InMemoryFormView, settings: Settings) -> FormEventBus:
    transport = None
    if not settings.dry_run:
        if http_module.http_client is None:
            raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, detail="Outbound HTTP client unavailable")
        transport = HttpxReservationTransport(http_module.http_client, settings.APPS_SCRIPT_URL)

    # The view lives for one request; the page hides success messages itself.
    controller = ReservationFormController(view, settings, transport, auto_hide=False)
    events = FormEventBus()
    controller.bind(events)
    await events.emit(READY)
    return events


@router.get("/reservations/options", response_model=ReservationOptionsOut)
async def reservation_options(settings: Settings = Depends(get_settings)) -> ReservationOptionsOut:
    view = InMemoryFormView()
    await _open_form(view, settings)
    return ReservationOptionsOut(
        min_date=view.min_date,
        max_date=view.max_date,
        time_slots=settings.TIME_SLOTS,
        party_sizes=[str(n) for n in range(1, settings.MAX_PARTY_SIZE + 1)],
        dry_run=settings.dry_run,
    )


@router.post("/reservations/date-check", response_model=DateCheckOut)
async def date_check(
    payload: DateCheckIn,
    settings: Settings = Depends(get_settings),
) -> DateCheckOut:
    view = InMemoryFormView(date=payload.date)
    events = await _open_form(view, settings)
    [accepted] = await events.emit(DATE_CHANGE)
    return DateCheckOut(
        accepted=accepted,
        date=view.get_value("date"),
        message=None if accepted else view.message,
    )


@router.post("/reservations", response_model=FormStateOut, status_code=status.HTTP_202_ACCEPTED)
async def submit_endpoint(
    payload: ReservationFormIn,
    settings: Settings = Depends(get_settings),
) -> FormStateOut:
    view = InMemoryFormView(**payload.model_dump())
    events = await _open_form(view, settings)
    [outcome] = await events.emit(SUBMIT)

    if outcome is SubmitStatus.INVALID:
        raise HTTPException(status.HTTP_422_UNPROCESSABLE_ENTITY, detail={"message": view.message})
    if outcome is SubmitStatus.FAILED:
        raise HTTPException(status.HTTP_502_BAD_GATEWAY, detail={"message": view.message})

    return FormStateOut(
        status=outcome.value,
        message=view.message,
        kind=view.message_kind,
        message_visible=view.message_visible,
        auto_hide_seconds=settings.SUCCESS_MESSAGE_TTL_SECONDS if view.message_kind == SUCCESS else None,
        submit_enabled=view.submit_enabled,
        submit_label=view.submit_label,
        values=view.values,
    )
