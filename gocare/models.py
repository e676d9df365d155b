"""Patient records and the request shapes that create or change them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from gocare.errors import AddressBlankError, FirstNameBlankError, LastNameBlankError

ENTITY_NAME = "Patient"
TABLE_NAME = "patients"


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError("request body must be a JSON object")
    return data


def _str_field(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string")
    return value


def _int_field(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise TypeError(f"field {key!r} must be an integer")
    return value


def _iso(moment: datetime | None) -> str | None:
    return moment.isoformat() if moment is not None else None


@dataclass(kw_only=True)
class SQLModel:
    """Columns shared by every table; status 0 marks a deleted row."""

    id: int = 0
    status: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(kw_only=True)
class Patient(SQLModel):
    first_name: str = ""
    last_name: str = ""
    gender: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
            "first-name": self.first_name,
            "last-name": self.last_name,
            "gender": self.gender,
            "phone": self.phone,
            "email": self.email,
            "address": self.address,
        }


@dataclass(kw_only=True)
class PatientCreate(SQLModel):
    first_name: str = ""
    last_name: str = ""

    def validate(self) -> None:
        """Reject blank names; the stored values are left as given."""
        if not self.first_name.strip():
            raise FirstNameBlankError()
        if not self.last_name.strip():
            raise LastNameBlankError()

    @classmethod
    def from_dict(cls, data: Any) -> PatientCreate:
        body = _mapping(data)
        return cls(
            first_name=_str_field(body, "first-name") or "",
            last_name=_str_field(body, "last-name") or "",
        )


@dataclass(kw_only=True)
class PatientUpdate:
    """A partial update; fields left as None are not changed."""

    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    status: int | None = None

    def validate(self) -> None:
        """Trim the given text fields and reject any that end up blank."""
        if self.first_name is not None:
            self.first_name = self.first_name.strip()
            if not self.first_name:
                raise FirstNameBlankError()
        if self.last_name is not None:
            self.last_name = self.last_name.strip()
            if not self.last_name:
                raise LastNameBlankError()
        if self.address is not None:
            self.address = self.address.strip()
            if not self.address:
                raise AddressBlankError()

    def changes(self) -> dict[str, Any]:
        """Column names mapped to the values that are set."""
        columns = {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "address": self.address,
            "status": self.status,
        }
        return {column: value for column, value in columns.items() if value is not None}

    @classmethod
    def from_dict(cls, data: Any) -> PatientUpdate:
        body = _mapping(data)
        return cls(
            first_name=_str_field(body, "first-name"),
            last_name=_str_field(body, "last-name"),
            address=_str_field(body, "address"),
            status=_int_field(body, "status"),
        )