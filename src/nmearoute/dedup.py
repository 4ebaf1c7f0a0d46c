"""Temporal and spatial deduplication of position records"""
import logging
import math


logger = logging.getLogger(__name__)

# Decimal degrees, ~1.1 m at the equator
SPATIAL_EPSILON = 1e-5


def dedup_temporal(records):
    """Keep only the last record seen for each timestamp.

    Later records for the same epoch overwrite earlier ones. Returns a new list
    sorted by timestamp. Timestamps are fixed-width zero-padded HHMMSS.sss
    strings so string order is chronological order within a day.

    Parameters
    -----------
    records: iterable of Record
        Records in file-read order.

    Returns
    -------
    list of Record
    """
    latest = {}
    for r in records:
        latest[r.timestamp] = r
    deduped = [latest[ts] for ts in sorted(latest)]
    logger.debug("temporal dedup kept %d unique timestamps", len(deduped))
    return deduped


def dedup_spatial(records, epsilon=SPATIAL_EPSILON):
    """Drop points which haven't moved more than epsilon degrees.

    The first record is always kept. Each later record is kept only if its
    latitude or longitude differs by strictly more than epsilon from the last
    kept record, so slow drift can't accumulate unnoticed.

    Parameters
    -----------
    records: iterable of Record
        Chronologically ordered records, consumed once.
    epsilon: float, default SPATIAL_EPSILON
        Minimum movement in decimal degrees, per axis.

    Returns
    -------
    list of Record
    """
    if not math.isfinite(epsilon) or epsilon < 0:
        raise ValueError("epsilon must be a finite number >= 0")
    kept = []
    seen = 0
    for r in records:
        seen += 1
        if not kept:
            kept.append(r)
            continue
        prev = kept[-1]
        if (abs(r.latitude - prev.latitude) > epsilon or
            abs(r.longitude - prev.longitude) > epsilon):
            kept.append(r)
    logger.debug("spatial dedup kept %d of %d points", len(kept), seen)
    return kept
