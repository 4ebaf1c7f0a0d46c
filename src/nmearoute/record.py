"""Value types passed between pipeline stages."""
from collections import namedtuple
import enum


# Field validity flags, bit positions match gpsd's gps.h
TIME_SET = 1 << 0
MODE_SET = 1 << 1
LATLON_SET = 1 << 4
SPEED_SET = 1 << 8

# Fix modes, values match gpsd's gps.h
MODE_NOT_SEEN = 0
MODE_NO_FIX = 1
MODE_2D = 2
MODE_3D = 3

MPS_TO_KMH = 3.6
MPS_TO_KNOTS = 1.9438444924406048


# timestamp is the raw HHMMSS.sss field and doubles as the dedup key
Record = namedtuple("Record", ["timestamp", "latitude", "longitude", "speed"])


class ParseFailure(namedtuple("ParseFailure", ["reason"])):
    """Rejected sentence. Always falsy so callers can test `if not result`."""
    __slots__ = ()

    def __bool__(self):
        return False


class ChecksumOutcome(enum.Enum):
    OK = "ok"
    INCOMPLETE = "incomplete"  # missing '$', '*' or hex digits
    MISMATCH = "mismatch"  # well formed, checksum doesn't match


class Fix:
    """
    Position fix container modeled on gpsd's gps_data_t.

    `set` is an OR of the *_SET flags naming which fields hold data. Lat/lon
    and speed are only considered available when their flag is set and the
    fix mode is at least MODE_2D.
    """

    def __init__(self, set=0, mode=MODE_NOT_SEEN, status=0, time=None,
                 latitude=None, longitude=None, speed=None):
        self.set = set
        self.mode = mode
        self.status = status
        self.time = time
        self.latitude = latitude
        self.longitude = longitude
        self.speed = speed

    def __repr__(self):
        return "Fix(set={:#x}, mode={}, lat={}, lon={}, speed={})".format(
            self.set, self.mode, self.latitude, self.longitude, self.speed
        )

    def has_latlon(self):
        return bool(self.set & LATLON_SET) and self.mode >= MODE_2D

    def has_speed(self):
        return bool(self.set & SPEED_SET) and self.mode >= MODE_2D

    def get_latlon(self):
        """Return (latitude, longitude). Raises ValueError if not available."""
        if not self.has_latlon():
            raise ValueError("fix has no valid latitude/longitude")
        return (self.latitude, self.longitude)

    def get_speed_mps(self):
        """Return speed in m/s. Raises ValueError if not available."""
        if not self.has_speed():
            raise ValueError("fix has no valid speed")
        return self.speed


def mps_to_kmh(mps):
    return mps * MPS_TO_KMH


def mps_to_knots(mps):
    return mps * MPS_TO_KNOTS
