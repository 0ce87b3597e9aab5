from pydantic import BaseModel, Field

FORM_FIELDS = ("name", "department", "email", "phone", "date", "time", "people", "message")

# Text inputs are trimmed when collected; select and date controls are taken as-is.
TRIMMED_FIELDS = frozenset({"name", "department", "email", "phone", "message"})


class ReservationRequest(BaseModel):
    """A reservation as collected from the form at submit time."""

    name: str = ""
    department: str = ""
    email: str = ""
    phone: str = ""
    # ISO date as the date input yields it, e.g. "2025-06-10"
    date: str = ""
    time: str = ""
    people: str = ""
    message: str = ""
    timestamp: str = Field(default="", description="Client-local creation time")

    def payload(self) -> dict[str, str]:
        """JSON body sent to the spreadsheet endpoint."""
        return self.model_dump()
