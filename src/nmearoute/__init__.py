import logging
from importlib.metadata import version

from . import conf
from . import dedup
from . import errors
from . import fileio
from . import geo
from . import nmea
from . import pipeline
from . import record
from . import route
from . import util

__version__ = version("nmearoute")

logging.getLogger(__name__).addHandler(logging.NullHandler())
