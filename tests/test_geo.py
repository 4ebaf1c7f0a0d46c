import pytest
import nmearoute as nmr

# pylint: disable=redefined-outer-name

class TestNmeaToDecimal:
    def test_nmea_to_decimal(self):
        assert nmr.geo.nmea_to_decimal("4807.038", "N") == pytest.approx(48.1173)
        assert nmr.geo.nmea_to_decimal("01131.000", "W") == pytest.approx(-11.516666667)
        assert nmr.geo.nmea_to_decimal("01131.000", "E") == pytest.approx(11.516666667)
        assert nmr.geo.nmea_to_decimal("4807.038", "S") == pytest.approx(-48.1173)

    def test_degree_digits_follow_decimal_point(self):
        # Degrees are everything before the last two digits left of '.'
        assert nmr.geo.nmea_to_decimal("0030.0", "N") == pytest.approx(0.5)
        assert nmr.geo.nmea_to_decimal("130.0", "N") == pytest.approx(1.5)
        assert nmr.geo.nmea_to_decimal("17959.9999", "E") == pytest.approx(179 + 59.9999 / 60)

    def test_no_fractional_minutes(self):
        assert nmr.geo.nmea_to_decimal("4807.", "N") == pytest.approx(48 + 7 / 60)

    def test_unknown_hemisphere_is_positive(self):
        assert nmr.geo.nmea_to_decimal("4807.038", "X") == pytest.approx(48.1173)

    def test_ranges_not_enforced(self):
        assert nmr.geo.nmea_to_decimal("9870.000", "N") == pytest.approx(98 + 70 / 60)

    def test_bad_coords(self):
        bad = [
            "",  # empty
            "4807",  # no decimal point
            ".038",  # nothing before decimal point
            "7.038",  # one character before decimal point
            "07.038",  # empty degree portion
            "48a7.038",  # non-numeric minutes
            "4x07.038",  # non-numeric degrees
            "4807.0x8",  # non-numeric fractional minutes
            "nan07.0",
            "1_007.0",
            "٤٨07.038",  # non-ASCII degree digits
            "48٠٧.038",  # non-ASCII minute digits
            "4807.٠38",  # non-ASCII fractional minutes
        ]
        for coord in bad:
            with pytest.raises(ValueError):
                _dd = nmr.geo.nmea_to_decimal(coord, "N")


class TestIsNmeaCoord:
    def test_is_nmea_coord(self):
        coords = ["4807.038", "01131.000", "4807", "07.038", "abcd.ef", ""]
        answers = [True, True, False, False, False, False]
        for (i, coord) in enumerate(coords):
            assert nmr.geo.is_nmea_coord(coord) == answers[i]
