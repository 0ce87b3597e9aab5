"""Outbound dispatch of reservations to the spreadsheet endpoint."""

import enum
import logging
from abc import ABC, abstractmethod

import httpx

logger = logging.getLogger(__name__)


class DispatchOutcome(enum.Enum):
    # The request left without a network error; the response was not inspected.
    SENT_UNCONFIRMED = "sent_unconfirmed"


class ReservationTransportError(Exception):
    """The reservation could not be sent at the network level."""


class ReservationTransport(ABC):
    """Capability to deliver a reservation payload to the external sink."""

    @abstractmethod
    async def send_without_confirmation(self, payload: dict) -> DispatchOutcome:
        """
        Send ``payload`` as JSON without reading the response.

        Returns:
            DispatchOutcome.SENT_UNCONFIRMED once the request was delivered

        Raises:
            ReservationTransportError: If the request failed at the network level
        """


class HttpxReservationTransport(ReservationTransport):
    """POST reservations through a shared ``httpx.AsyncClient``.

    Apps Script web apps do not allow the response to be inspected from the
    booking page, so neither the status code nor the body is read here.
    """

    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self._url = url

    async def send_without_confirmation(self, payload: dict) -> DispatchOutcome:
        try:
            async with self._client.stream(
                "POST",
                self._url,
                json=payload,
                headers={"Content-Type": "application/json"},
            ):
                pass
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ReservationTransportError(f"POST {self._url} failed: {exc!r}") from exc

        logger.debug("Reservation dispatched to %s (response not inspected)", self._url)
        return DispatchOutcome.SENT_UNCONFIRMED
