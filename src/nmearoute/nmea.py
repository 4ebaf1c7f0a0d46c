"""NMEA 0183 sentence validation and RMC extraction."""
import logging
import re
from . import geo
from .record import ChecksumOutcome, ParseFailure, Record


logger = logging.getLogger(__name__)

SENTENCE_START = "$"
CHECKSUM_SEP = "*"
FIELD_DELIM = ","
STATUS_ACTIVE = "A"

KNOTS_TO_MPS = 0.514444

# Sentences we extract fixes from, GPS-only and multi-constellation
SUPPORTED_IDS = frozenset(["$GPRMC", "$GNRMC"])
# Known sentences we choose not to process
UNSUPPORTED_IDS = frozenset(["$GPGGA", "$GPGSA", "$GNGGA", "$GNGSA"])

# Indexes into a split RMC sentence
RMC_ID = 0
RMC_TIME = 1
RMC_STATUS = 2
RMC_LAT = 3
RMC_LAT_HEM = 4
RMC_LON = 5
RMC_LON_HEM = 6
RMC_SPEED = 7
RMC_MIN_FIELDS = 8

HEX_BYTE_RE = re.compile(r'^[0-9A-Fa-f]{2}$')


def _to_bytes(s):
    # Lines are decoded with surrogateescape so raw bytes round-trip here
    return s.encode("utf-8", errors="surrogateescape")


def checksum(body):
    """XOR of every byte in body, the text between '$' and '*'."""
    value = 0
    for b in _to_bytes(body):
        value ^= b
    return value


def add_checksum(body):
    """Build a complete sentence "$<body>*HH" from a sentence body."""
    if body.startswith(SENTENCE_START):
        body = body[1:]
    return "{}{}{}{:02X}".format(SENTENCE_START, body, CHECKSUM_SEP, checksum(body))


def verify(line):
    """
    Verify the checksum of an NMEA sentence "$....*HH".

    Returns a ChecksumOutcome. INCOMPLETE means the line lacks the structure
    needed to check it at all, MISMATCH means the line is well formed but the
    declared and computed checksums differ.
    """
    if not line.startswith(SENTENCE_START):
        return ChecksumOutcome.INCOMPLETE
    star = line.rfind(CHECKSUM_SEP)
    if star == -1 or star + 3 > len(line):
        return ChecksumOutcome.INCOMPLETE
    declared = line[star + 1:star + 3]
    if not HEX_BYTE_RE.match(declared):
        return ChecksumOutcome.INCOMPLETE
    if checksum(line[1:star]) == int(declared, 16):
        return ChecksumOutcome.OK
    return ChecksumOutcome.MISMATCH


def sentence_id(line):
    """Return the text before the first field delimiter, or None if there isn't one."""
    comma = line.find(FIELD_DELIM)
    if comma == -1:
        return None
    return line[:comma]


def is_unsupported(line, unsupported=UNSUPPORTED_IDS):
    """Is this a recognized sentence type which we don't extract fixes from?"""
    sid = sentence_id(line)
    if sid is None:
        return False
    return sid in unsupported


def split_fields(line):
    """Split a sentence into fields after removing any *HH checksum tail.

    Empty fields are kept as empty strings.
    """
    star = line.rfind(CHECKSUM_SEP)
    body = line[:star] if star != -1 else line
    return body.split(FIELD_DELIM)


def parse_speed(field):
    """Speed over ground in knots to m/s. Empty or unparseable values are 0."""
    knots = 0.0
    if field:
        try:
            knots = float(field)
        except ValueError:
            knots = 0.0
    return knots * KNOTS_TO_MPS


def parse(line):
    """
    Parse an RMC sentence which already passed checksum verification.

    Returns a Record on success, otherwise a ParseFailure naming the first
    check which failed.

    RMC fields (0-based after splitting on ','):
      0 - sentence ID ($GPRMC or $GNRMC)
      1 - UTC time (HHMMSS.sss)
      2 - status, 'A' active or 'V' void
      3 - latitude (DDMM.MMMM)
      4 - N/S
      5 - longitude (DDDMM.MMMM)
      6 - E/W
      7 - speed over ground (knots)
      8 and later are not used
    """
    fields = split_fields(line)
    if len(fields) < RMC_MIN_FIELDS:
        return ParseFailure("too few fields")
    if fields[RMC_ID] not in SUPPORTED_IDS:
        return ParseFailure("unsupported sentence id")
    if not fields[RMC_STATUS].startswith(STATUS_ACTIVE):
        return ParseFailure("no active fix")
    if not fields[RMC_TIME]:
        return ParseFailure("missing timestamp")
    if len(fields[RMC_LAT_HEM]) != 1 or len(fields[RMC_LON_HEM]) != 1:
        return ParseFailure("bad hemisphere")
    try:
        lat = geo.nmea_to_decimal(fields[RMC_LAT], fields[RMC_LAT_HEM])
        lon = geo.nmea_to_decimal(fields[RMC_LON], fields[RMC_LON_HEM])
    except ValueError as e:
        logger.debug("coordinate conversion failed: %s", e)
        return ParseFailure("bad coordinate")

    return Record(
        timestamp=fields[RMC_TIME],
        latitude=lat,
        longitude=lon,
        speed=parse_speed(fields[RMC_SPEED])
    )
