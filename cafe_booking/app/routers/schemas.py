from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ReservationFormIn(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(default="", max_length=200)
    department: str = Field(default="", max_length=200)
    email: str = Field(default="", max_length=254)
    phone: str = Field(default="", max_length=32)
    # ISO date, e.g. "2025-06-10"
    date: str = Field(default="", max_length=10)
    time: str = Field(default="", max_length=5)
    people: str = Field(default="", max_length=3)
    message: str = Field(default="", max_length=1024)


class FormStateOut(BaseModel):
    status: str
    # Dispatch succeeded but the sink never confirms receipt.
    confirmed: bool = False
    message: str | None
    kind: str | None
    message_visible: bool
    auto_hide_seconds: float | None = None
    submit_enabled: bool
    submit_label: str
    values: dict[str, str]


class DateCheckIn(BaseModel):
    date: str = Field(max_length=10)


class DateCheckOut(BaseModel):
    accepted: bool
    date: str
    message: str | None = None


class ReservationOptionsOut(BaseModel):
    min_date: date
    max_date: date
    time_slots: list[str]
    party_sizes: list[str]
    dry_run: bool
