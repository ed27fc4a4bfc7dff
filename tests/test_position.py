"""Tests for position synthesis."""

from custom_components.gsmloc.models import (
    AccuracyLevel,
    CellIdentity,
    PositionFields,
)
from custom_components.gsmloc.position import synthesize


def test_no_fields():
    """Test an empty lookup gives no accuracy and no fields."""
    result = synthesize(1700000000)

    assert result.fields == PositionFields.NONE
    assert result.accuracy == AccuracyLevel.NONE
    assert result.timestamp == 1700000000


def test_latitude_only():
    """Test latitude alone sets only its flag."""
    result = synthesize(1700000000, latitude=45.0)

    assert result.fields == PositionFields.LATITUDE
    assert result.accuracy == AccuracyLevel.POSTALCODE
    assert result.longitude is None


def test_all_fields():
    """Test every coordinate sets its own flag."""
    cell = CellIdentity(mcc="246", mnc="81", lac=6699, cid=63)

    result = synthesize(1, latitude=54.7, longitude=25.3, altitude=112.0, cell=cell)

    assert result.fields == (
        PositionFields.LATITUDE | PositionFields.LONGITUDE | PositionFields.ALTITUDE
    )
    assert result.accuracy == AccuracyLevel.POSTALCODE
    assert result.cell == cell


def test_zero_coordinates_are_valid():
    """Test a 0.0 coordinate still counts as present."""
    result = synthesize(1, latitude=0.0, longitude=0.0)

    assert result.fields == PositionFields.LATITUDE | PositionFields.LONGITUDE


def test_accuracy_levels_ordered():
    """Test accuracy levels compare in order of confidence."""
    assert AccuracyLevel.NONE < AccuracyLevel.POSTALCODE < AccuracyLevel.DETAILED
