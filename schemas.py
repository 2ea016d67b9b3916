"""Request schemas - Pydantic models for validating JSON bodies"""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, EmailStr, Field, ValidationError, field_validator

from scheduling.slots import is_time_string, parse_date


def _check_date(value: str) -> str:
    value = value.strip()
    parse_date(value)
    return value


class AppointmentCreate(BaseModel):
    """Public booking request. Status, id and created_at are never client-supplied."""

    name: str = Field(..., min_length=3, max_length=120)
    email: EmailStr
    phone: str = Field(..., min_length=10, max_length=30)
    category_id: int = Field(..., validation_alias=AliasChoices("category_id", "categoryId"))
    service_id: int = Field(..., validation_alias=AliasChoices("service_id", "serviceId"))
    date: str
    time: str
    notes: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("name", "phone")
    @classmethod
    def strip_text(cls, v):
        return v.strip()

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        return _check_date(v)

    @field_validator("time")
    @classmethod
    def validate_time(cls, v):
        v = v.strip()
        if not is_time_string(v):
            raise ValueError("Invalid time. Use HH:MM")
        return v

    @field_validator("notes")
    @classmethod
    def blank_notes_to_none(cls, v):
        if v is None:
            return v
        return v.strip() or None


class StatusUpdate(BaseModel):
    status: str = Field(..., min_length=1)


class SaleCreate(BaseModel):
    client_name: str = Field(..., min_length=3, max_length=120,
                             validation_alias=AliasChoices("client_name", "clientName"))
    service_id: int = Field(..., validation_alias=AliasChoices("service_id", "serviceId"))
    amount: float = Field(..., ge=0)
    date: str
    payment_method: str = Field(..., min_length=1, max_length=40,
                                validation_alias=AliasChoices("payment_method", "paymentMethod"))

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        return _check_date(v)


def error_details(exc: ValidationError) -> List[dict]:
    """Flatten pydantic errors into JSON-safe field/message pairs."""
    return [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
