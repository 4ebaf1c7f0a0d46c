import configparser
import math
import os
import re
from . import dedup
from . import errors
from . import nmea
from . import util


CONFIG_FILE = os.path.expanduser("~/.nmearoute/config")

DEDUP_SECTION = "dedup"
SENTENCES_SECTION = "sentences"


def get_config(config_path=CONFIG_FILE):
    config = configparser.ConfigParser()
    _ = config.read(config_path)
    return config


def get_epsilon(config=None, config_path=CONFIG_FILE):
    """Spatial dedup epsilon in decimal degrees, default dedup.SPATIAL_EPSILON."""
    if not config:
        config = get_config(config_path=config_path)
    try:
        epsilon = config.getfloat(DEDUP_SECTION, "epsilon", fallback=dedup.SPATIAL_EPSILON)
    except ValueError as e:
        raise errors.ConfigError("invalid [{}] epsilon: {}".format(DEDUP_SECTION, e)) from e
    if not math.isfinite(epsilon) or epsilon < 0:
        raise errors.ConfigError("[{}] epsilon must be a finite number >= 0".format(DEDUP_SECTION))
    return epsilon


def get_unsupported_ids(config=None, config_path=CONFIG_FILE):
    """Sentence IDs counted as known but unsupported, default nmea.UNSUPPORTED_IDS.

    Configured as a comma or whitespace separated list, e.g.
    "unsupported = $GPGGA, $GPGSA, $GPGSV"
    """
    if not config:
        config = get_config(config_path=config_path)
    value = config.get(SENTENCES_SECTION, "unsupported", fallback=None)
    if value is None:
        return nmea.UNSUPPORTED_IDS
    ids = [i for i in re.split(r'[,\s]+', value) if i]
    for i in ids:
        if not i.startswith(nmea.SENTENCE_START):
            raise errors.ConfigError(
                "[{}] unsupported sentence id '{}' must start with '{}'".format(
                    SENTENCES_SECTION, i, nmea.SENTENCE_START
                )
            )
    return frozenset(ids)


def save_config(config, config_path=CONFIG_FILE):
    # Write config data to disk
    util.mkdir_p(os.path.dirname(config_path))
    with open(config_path, mode="w", encoding="utf-8") as fh:
        config.write(fh)
