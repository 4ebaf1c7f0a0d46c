"""Geo operations"""
import re


# Degrees are whatever precedes the last two digits before the decimal point
NMEA_DEGREES_RE = re.compile(r'^[+-]?[0-9]+$')
NMEA_MINUTES_RE = re.compile(r'^[0-9]{2}\.[0-9]*$')

SOUTH_WEST = ("S", "W")


def split_nmea_coord(coord):
    """Split an NMEA DDMM.MMMM / DDDMM.MMMM string into (degrees, minutes) strings.

    Raises ValueError if there is no decimal point or fewer than two
    characters precede it.
    """
    dot = coord.find(".")
    if dot < 2:
        raise ValueError("Invalid NMEA coordinate string '{}'".format(coord))
    return coord[:dot - 2], coord[dot - 2:]


def nmea_to_decimal(coord, hemisphere):
    """NMEA coordinate string plus hemisphere letter to signed decimal degrees.

    Latitude and longitude are handled the same way, the number of degree
    digits is inferred from the position of the decimal point. S and W
    hemispheres produce negative values, anything else is positive. Degree
    and minute ranges are not checked.

    e.g. ("4807.038", "N") -> 48.1173
         ("01131.000", "W") -> -11.516666...

    Raises ValueError if coord can't be converted.
    """
    degrees_str, minutes_str = split_nmea_coord(coord)
    if not NMEA_DEGREES_RE.match(degrees_str) or not NMEA_MINUTES_RE.match(minutes_str):
        raise ValueError("Invalid NMEA coordinate string '{}'".format(coord))
    dd = int(degrees_str) + float(minutes_str) / 60.0
    if hemisphere in SOUTH_WEST:
        dd = -dd
    return dd


def is_nmea_coord(coord):
    """Does this string look like an NMEA DDMM.MMMM coordinate"""
    try:
        degrees_str, minutes_str = split_nmea_coord(coord)
    except ValueError:
        return False
    return bool(NMEA_DEGREES_RE.match(degrees_str) and NMEA_MINUTES_RE.match(minutes_str))
