"""
Access log data models.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


# Exact formats, in strptime notation, for dd.MM.yyyy HH:mm:ss and dd.MM.yyyy
TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M:%S"
DATE_FORMAT = "%d.%m.%Y"

ENTRY_SEPARATOR = ": "


def parse_octets(address: str) -> List[int]:
    """
    Split a dotted-quad address into its four integer octets.

    Args:
        address: Address such as "192.168.1.10"

    Returns:
        The four octets as integers

    Raises:
        ValueError: If the address is not four decimal octets in 0-255
    """
    parts = address.split(".")
    if len(parts) != 4:
        raise ValueError(f"Expected four octets in {address!r}")

    octets = []
    for part in parts:
        if not part.isascii() or not part.isdigit():
            raise ValueError(f"Octet {part!r} in {address!r} is not a decimal number")
        value = int(part)
        if value > 255:
            raise ValueError(f"Octet {part!r} in {address!r} is out of range 0-255")
        octets.append(value)
    return octets


class LogEntry(BaseModel):
    """
    One parsed access log line.

    Entries are immutable once parsed.
    """

    address: str = Field(..., description="Source address as a dotted quad")
    timestamp: datetime = Field(..., description="Access time, second precision")

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        parse_octets(v)
        return v

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "address": "10.0.0.1",
                "timestamp": "2023-01-01T10:00:00",
            }
        }


class DateRange(BaseModel):
    """
    Inclusive scan window.

    Both bounds are midnight of the given calendar day. The end bound is
    not stretched to the end of its day.
    """

    start: datetime
    end: datetime

    def contains(self, timestamp: datetime) -> bool:
        return self.start <= timestamp <= self.end


class AddressFilter(BaseModel):
    """Optional address filters, kept exactly as the user supplied them."""

    address_start: Optional[str] = Field(
        None, description="Per-octet lower bound, e.g. 192.168.0.0"
    )
    address_mask: Optional[str] = Field(
        None, description="Per-octet bit mask, e.g. 255.255.255.0"
    )

    @field_validator("address_start", "address_mask")
    @classmethod
    def empty_is_absent(cls, v: Optional[str]) -> Optional[str]:
        # An empty flag value means the filter is not active
        if v is not None and not v.strip():
            return None
        return v


class ReportRow(BaseModel):
    """One line of the hit count report."""

    address: str
    count: int = Field(..., ge=1, description="Number of accepted entries from the address")

    def render(self) -> str:
        return f"{self.address}{ENTRY_SEPARATOR}{self.count}"
