"""Position synthesis for the Gsmloc integration."""

from __future__ import annotations

from .models import AccuracyLevel, CellIdentity, PositionFields, PositionResult


def synthesize(
    timestamp: int,
    latitude: float | None = None,
    longitude: float | None = None,
    altitude: float | None = None,
    cell: CellIdentity | None = None,
) -> PositionResult:
    """Combine looked up coordinates into a position result.

    Each coordinate sets its field flag independently. Any valid field gives
    a postal code level estimate, which is all a cell lookup can promise.
    """
    fields = PositionFields.NONE
    if latitude is not None:
        fields |= PositionFields.LATITUDE
    if longitude is not None:
        fields |= PositionFields.LONGITUDE
    if altitude is not None:
        fields |= PositionFields.ALTITUDE

    if fields == PositionFields.NONE:
        accuracy = AccuracyLevel.NONE
    else:
        accuracy = AccuracyLevel.POSTALCODE

    return PositionResult(
        timestamp=timestamp,
        fields=fields,
        latitude=latitude,
        longitude=longitude,
        altitude=altitude,
        accuracy=accuracy,
        cell=cell,
    )
