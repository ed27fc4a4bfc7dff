"""Data models for the Gsmloc integration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag, StrEnum


@dataclass(frozen=True)
class RawNetworkInfo:
    """Serving cell as reported by the modem."""

    network_code: str  # "MCC MNC"
    lac: str  # hexadecimal
    cid: str  # hexadecimal
    network_name: str | None = None


@dataclass(frozen=True)
class CellIdentity:
    """Normalized serving cell identity."""

    mcc: str
    mnc: str
    lac: int
    cid: int


class PositionFields(IntFlag):
    """Which coordinates of a position are valid."""

    NONE = 0
    LATITUDE = 1
    LONGITUDE = 2
    ALTITUDE = 4


class AccuracyLevel(IntEnum):
    """Coarse confidence of a position estimate."""

    NONE = 0
    COUNTRY = 1
    REGION = 2
    LOCALITY = 3
    POSTALCODE = 4
    STREET = 5
    DETAILED = 6


class ProviderStatus(StrEnum):
    """Status reported by the provider."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    ERROR = "error"


@dataclass
class PositionResult:
    """Position estimate for a single request."""

    timestamp: int
    fields: PositionFields = PositionFields.NONE
    latitude: float | None = None
    longitude: float | None = None
    altitude: float | None = None
    accuracy: AccuracyLevel = AccuracyLevel.NONE
    cell: CellIdentity | None = None
