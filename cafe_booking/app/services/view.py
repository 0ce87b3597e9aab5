"""Presentation-layer seam for the reservation form."""

from abc import ABC, abstractmethod
from datetime import date

from cafe_booking.app.services.request import FORM_FIELDS

SUCCESS = "success"
ERROR = "error"


class FormView(ABC):
    """
    Read/write access to the reservation form and its message region.

    The controller only talks to the form through this interface, so any
    surface (a web page bridge, a test double) can host it.
    """

    @abstractmethod
    def get_value(self, field: str) -> str:
        """Current raw value of a form field."""

    @abstractmethod
    def set_value(self, field: str, value: str) -> None:
        """Overwrite a form field."""

    @abstractmethod
    def set_date_bounds(self, earliest: date, latest: date) -> None:
        """Restrict the date input to an inclusive range."""

    @abstractmethod
    def set_submit_state(self, enabled: bool, label: str) -> None:
        """Enable or disable the submit control and set its label."""

    @abstractmethod
    def show_message(self, body: str, kind: str) -> None:
        """Display ``body`` in the message region styled as ``kind``."""

    @abstractmethod
    def hide_message(self) -> None:
        """Hide the message region."""

    @abstractmethod
    def scroll_to_message(self) -> None:
        """Bring the message region into view."""

    def reset(self) -> None:
        """Clear every form field."""
        for field in FORM_FIELDS:
            self.set_value(field, "")


class InMemoryFormView(FormView):
    """FormView backed by plain attributes; used by the HTTP surface and tests."""

    def __init__(self, **values: str) -> None:
        unknown = set(values) - set(FORM_FIELDS)
        if unknown:
            raise ValueError(f"Unknown form fields: {', '.join(sorted(unknown))}")
        self.values = {field: values.get(field, "") for field in FORM_FIELDS}
        self.min_date: date | None = None
        self.max_date: date | None = None
        self.submit_enabled = True
        self.submit_label = ""
        self.message: str | None = None
        self.message_kind: str | None = None
        self.message_visible = False
        self.scroll_count = 0

    def get_value(self, field: str) -> str:
        return self.values[field]

    def set_value(self, field: str, value: str) -> None:
        if field not in self.values:
            raise KeyError(field)
        self.values[field] = value

    def set_date_bounds(self, earliest: date, latest: date) -> None:
        self.min_date = earliest
        self.max_date = latest

    def set_submit_state(self, enabled: bool, label: str) -> None:
        self.submit_enabled = enabled
        self.submit_label = label

    def show_message(self, body: str, kind: str) -> None:
        self.message = body
        self.message_kind = kind
        self.message_visible = True

    def hide_message(self) -> None:
        self.message_visible = False

    def scroll_to_message(self) -> None:
        self.scroll_count += 1
