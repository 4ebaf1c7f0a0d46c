"""Run NMEA log lines through validation, parsing and deduplication."""
import logging
from . import dedup
from . import errors
from . import fileio
from . import nmea
from .record import ChecksumOutcome


logger = logging.getLogger(__name__)

# Line classifications
OK = "ok"
INCOMPLETE = "incomplete"
CHECKSUM = "checksum"
UNSUPPORTED = "unsupported"
PARSE = "parse"


class Summary:
    """Counters accumulated while processing NMEA logs."""

    fields = [
        ("lines_total", "Total lines read"),
        ("incomplete", "Incomplete sentences"),
        ("checksum_fail", "Checksum failures"),
        ("not_relevant", "Not relevant (skipped)"),
        ("parse_fail", "Parse/validation fail"),
        ("records", "Valid records parsed"),
        ("after_temporal", "After timestamp dedup"),
        ("after_spatial", "After spatial dedup"),
    ]

    def __init__(self):
        self.lines_total = 0
        self.incomplete = 0
        self.checksum_fail = 0
        self.not_relevant = 0
        self.parse_fail = 0
        self.records = 0
        self.after_temporal = 0
        self.after_spatial = 0
        self.files_read = 0
        self.files_skipped = 0

    def count(self, category):
        """Add one line in category to the totals."""
        self.lines_total += 1
        if category == OK:
            self.records += 1
        elif category == INCOMPLETE:
            self.incomplete += 1
        elif category == CHECKSUM:
            self.checksum_fail += 1
        elif category == UNSUPPORTED:
            self.not_relevant += 1
        elif category == PARSE:
            self.parse_fail += 1
        else:
            raise ValueError("unknown line category '{}'".format(category))

    def as_dict(self):
        d = {k: getattr(self, k) for k, _ in self.fields}
        d["files_read"] = self.files_read
        d["files_skipped"] = self.files_skipped
        return d

    def format(self):
        width = max(len(label) for _, label in self.fields)
        lines = ["=== Processing Summary ==="]
        for k, label in self.fields:
            lines.append("  {:<{w}}: {}".format(label, getattr(self, k), w=width))
        return "\n".join(lines)


def classify_line(line, unsupported=nmea.UNSUPPORTED_IDS):
    """
    Classify one raw line.

    Returns a 2-tuple of (category, result). result is a Record for OK lines,
    a ParseFailure for PARSE lines and None for everything else.
    """
    outcome = nmea.verify(line)
    if outcome is ChecksumOutcome.INCOMPLETE:
        return (INCOMPLETE, None)
    if outcome is ChecksumOutcome.MISMATCH:
        return (CHECKSUM, None)
    if nmea.is_unsupported(line, unsupported):
        return (UNSUPPORTED, None)
    result = nmea.parse(line)
    if not result:
        return (PARSE, result)
    return (OK, result)


def process_lines(lines, summary=None, unsupported=nmea.UNSUPPORTED_IDS):
    """
    Validate and parse lines in order.

    Returns a 2-tuple of (list of Record, Summary). If summary is given its
    counters are updated in place and it is returned.
    """
    if summary is None:
        summary = Summary()
    records = []
    for line in lines:
        category, result = classify_line(line, unsupported)
        summary.count(category)
        if category == OK:
            records.append(result)
        elif category == PARSE:
            logger.debug("rejected (%s): %s", result.reason, line)
        else:
            logger.debug("rejected (%s): %s", category, line)
    return (records, summary)


def process_files(paths, epsilon=dedup.SPATIAL_EPSILON, unsupported=nmea.UNSUPPORTED_IDS):
    """
    Build a deduplicated route from NMEA log files.

    Files are read in the order given. Files which can't be read are logged
    and skipped.

    Returns a 2-tuple of (route as list of Record, Summary).
    """
    summary = Summary()
    records = []
    for path in paths:
        try:
            lines = fileio.read_lines(path)
        except errors.FileError as e:
            logger.warning("cannot open '%s', skipping: %s", path, e)
            summary.files_skipped += 1
            continue
        summary.files_read += 1
        file_records, _ = process_lines(lines, summary, unsupported)
        logger.info("%s: %d lines, %d records", path, len(lines), len(file_records))
        records.extend(file_records)

    deduped = dedup.dedup_temporal(records)
    route = dedup.dedup_spatial(deduped, epsilon)
    summary.after_temporal = len(deduped)
    summary.after_spatial = len(route)
    logger.info(
        "%d records, %d after timestamp dedup, %d after spatial dedup",
        len(records), len(deduped), len(route)
    )
    return (route, summary)
