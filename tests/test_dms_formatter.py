"""Unit tests for geo_dms.dms_formatter module."""

import math

import pytest

from geo_dms.dms_formatter import (
    DEFAULT_PRECISION,
    UNDEFINED_PLACEHOLDER,
    DmsFormat,
    format_bearing,
    format_dms,
    format_latitude,
    format_longitude,
    parse_format,
)

NAN = float("nan")


class TestFormatDms:
    """Tests for format_dms()."""

    def test_default_format_is_dms(self) -> None:
        assert format_dms(0) == "000°00′00″"
        assert format_dms(45.76260) == "045°45′45″"

    @pytest.mark.parametrize(
        "fmt,precision,expected",
        [
            (DmsFormat.D, None, "000.0000°"),
            (DmsFormat.DM, None, "000°00.00′"),
            (DmsFormat.DMS, None, "000°00′00″"),
            (DmsFormat.D, 0, "000°"),
            (DmsFormat.DM, 0, "000°00′"),
            (DmsFormat.DMS, 0, "000°00′00″"),
            (DmsFormat.D, 2, "000.00°"),
            (DmsFormat.DM, 2, "000°00.00′"),
            (DmsFormat.DMS, 2, "000°00′00.00″"),
        ],
        ids=["d", "dm", "dms", "d-0", "dm-0", "dms-0", "d-2", "dm-2", "dms-2"],
    )
    def test_zero(self, fmt: DmsFormat, precision, expected: str) -> None:
        """Test zero is fully zero-padded in every layout."""
        assert format_dms(0, fmt, precision) == expected

    @pytest.mark.parametrize(
        "fmt,precision,expected",
        [
            (DmsFormat.D, None, "045.7626°"),
            (DmsFormat.DM, None, "045°45.76′"),
            (DmsFormat.DMS, None, "045°45′45″"),
            (DmsFormat.D, 0, "046°"),
            (DmsFormat.DM, 0, "045°46′"),
            (DmsFormat.DMS, 0, "045°45′45″"),
            (DmsFormat.D, 6, "045.762600°"),
            (DmsFormat.DM, 4, "045°45.7560′"),
            (DmsFormat.DMS, 2, "045°45′45.36″"),
        ],
        ids=["d", "dm", "dms", "d-0", "dm-0", "dms-0", "d-6", "dm-4", "dms-2"],
    )
    def test_value(self, fmt: DmsFormat, precision, expected: str) -> None:
        assert format_dms(45.76260, fmt, precision) == expected

    @pytest.mark.parametrize(
        "value,fmt,expected",
        [
            (1.99999999999999, DmsFormat.DM, "002°00.00′"),
            (51.19999999999999, DmsFormat.D, "051.2000°"),
            (51.19999999999999, DmsFormat.DM, "051°12.00′"),
            (51.19999999999999, DmsFormat.DMS, "051°12′00″"),
            (51.99999999999999, DmsFormat.DMS, "052°00′00″"),
        ],
        ids=["dm-to-degrees", "d", "dm", "dms-to-minutes", "dms-to-degrees"],
    )
    def test_round_up_carries(self, value: float, fmt: DmsFormat, expected: str) -> None:
        """Test rounding overflow in the smallest unit carries into larger units."""
        assert format_dms(value, fmt) == expected

    def test_carry_wraps_degrees_produced_by_rounding(self) -> None:
        """Test 359.99...° rounding up to 360 is shown as 000."""
        assert format_dms(359.9999999999999, DmsFormat.DMS) == "000°00′00″"
        assert format_dms(359.99999, DmsFormat.D, 2) == "000.00°"

    def test_out_of_range_input_not_wrapped(self) -> None:
        """Test an input already past 360 keeps its degrees."""
        assert format_dms(365, DmsFormat.DMS) == "365°00′00″"
        assert format_dms(360, DmsFormat.D, 1) == "360.0°"

    def test_sign_is_dropped(self) -> None:
        assert format_dms(-45.76260) == format_dms(45.76260)
        assert format_dms(-0.5, DmsFormat.DM) == "000°30.00′"

    def test_large_degrees_grow_field(self) -> None:
        """Test degrees wider than the padding are not truncated."""
        assert format_dms(1234.5, DmsFormat.D, 1) == "1234.5°"

    def test_separator(self) -> None:
        """Test a separator is placed between the components."""
        assert format_dms(45.76260, DmsFormat.DMS, 2, " ") == "045° 45′ 45.36″"
        assert format_dms(45.76260, DmsFormat.DM, 2, " ") == "045° 45.76′"
        assert format_dms(45.76260, DmsFormat.D, 2, " ") == "045.76°"

    @pytest.mark.parametrize(
        "fmt,precision",
        [
            (DmsFormat.D, None),
            (DmsFormat.DM, None),
            (DmsFormat.DMS, None),
            (DmsFormat.D, 0),
            (DmsFormat.DM, 0),
            (DmsFormat.DMS, 0),
            (DmsFormat.D, 6),
            (DmsFormat.DM, 4),
            (DmsFormat.DMS, 2),
        ],
    )
    def test_nan_is_none(self, fmt: DmsFormat, precision) -> None:
        """Test an undefined angle produces no string."""
        assert format_dms(NAN, fmt, precision) is None

    def test_infinity_is_none(self) -> None:
        assert format_dms(math.inf) is None
        assert format_dms(-math.inf, DmsFormat.D) is None

    @pytest.mark.parametrize("fmt", ["d", "DM", "Dms"])
    def test_format_names(self, fmt: str) -> None:
        """Test formats can be given by case-insensitive name."""
        assert format_dms(0, fmt) == format_dms(0, DmsFormat(fmt.lower()))

    def test_invalid_format(self) -> None:
        with pytest.raises(ValueError, match="Invalid format 'dd'"):
            format_dms(1.0, "dd")

    @pytest.mark.parametrize("precision", [-1, 1.5, True, "2"])
    def test_invalid_precision(self, precision) -> None:
        with pytest.raises(ValueError, match="Precision must be a non-negative integer"):
            format_dms(1.0, DmsFormat.DMS, precision)

    def test_invalid_arguments_rejected_for_nan(self) -> None:
        """Test bad arguments raise even when there is nothing to render."""
        with pytest.raises(ValueError):
            format_dms(NAN, "x")


class TestFormatLatitude:
    """Tests for format_latitude()."""

    def test_north(self) -> None:
        assert format_latitude(51.2, DmsFormat.DMS) == "51°12′00″N"
        assert format_latitude(51.2, DmsFormat.DMS, 0) == "51°12′00″N"

    def test_south(self) -> None:
        assert format_latitude(-33.92, DmsFormat.DM) == "33°55.20′S"

    def test_zero_is_north(self) -> None:
        assert format_latitude(0) == "00°00′00″N"

    def test_decimal_degrees(self) -> None:
        assert format_latitude(9.5, DmsFormat.D, 1) == "09.5°N"

    def test_separator_before_hemisphere(self) -> None:
        assert format_latitude(51.2, DmsFormat.DMS, 0, " ") == "51° 12′ 00″ N"

    def test_nan_placeholder(self) -> None:
        assert format_latitude(NAN) == UNDEFINED_PLACEHOLDER


class TestFormatLongitude:
    """Tests for format_longitude()."""

    def test_east(self) -> None:
        assert format_longitude(0.33, DmsFormat.DMS) == "000°19′48″E"
        assert format_longitude(0.33, DmsFormat.DMS, 0) == "000°19′48″E"

    def test_west(self) -> None:
        assert format_longitude(-122.5, DmsFormat.DM, 1) == "122°30.0′W"

    def test_nan_placeholder(self) -> None:
        assert format_longitude(NAN, DmsFormat.D) == UNDEFINED_PLACEHOLDER


class TestFormatBearing:
    """Tests for format_bearing()."""

    def test_values(self) -> None:
        assert format_bearing(1.0, DmsFormat.DMS, 0) == "001°00′00″"
        assert format_bearing(359.9999999999999, DmsFormat.DMS, 0) == "000°00′00″"

    def test_wraps_into_circle(self) -> None:
        """Test negative and over-360 bearings are reduced to 0-360."""
        assert format_bearing(-90) == "270°00′00″"
        assert format_bearing(450, DmsFormat.D, 1) == "090.0°"

    def test_nan_placeholder(self) -> None:
        assert format_bearing(NAN, DmsFormat.DMS, 2) == "-"


class TestParseFormat:
    """Tests for parse_format() and the default precisions."""

    def test_enum_passthrough(self) -> None:
        assert parse_format(DmsFormat.DM) is DmsFormat.DM

    def test_error_lists_valid_formats(self) -> None:
        with pytest.raises(ValueError, match="Must be one of: d, dm, dms"):
            parse_format("degrees")

    def test_default_precision(self) -> None:
        assert DEFAULT_PRECISION == {DmsFormat.D: 4, DmsFormat.DM: 2, DmsFormat.DMS: 0}
