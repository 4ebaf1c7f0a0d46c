from contextlib import ExitStack, contextmanager
import io
import logging
import zlib
from pathlib import Path

import zstandard
from . import errors


logger = logging.getLogger(__name__)

encoding = "utf-8"


@contextmanager
def file_open_r(path, fileobj=None):
    """
    Open an NMEA log for reading bytes as a context manager.

    Bytes come from fileobj if given, otherwise from path. The suffix of path
    selects decompression even when reading from fileobj: '.gz' for gzip,
    '.zst' for zstandard, anything else is read as is. Files opened here are
    closed when the 'with' block exits.
    """
    path = Path(path)
    with ExitStack() as stack:
        if fileobj is None:
            fileobj = stack.enter_context(open(path, 'rb'))
        if path.suffix == '.gz':
            zobj = zlib.decompressobj(wbits=zlib.MAX_WBITS|32)
            yield io.BytesIO(zobj.decompress(fileobj.read()))
        elif path.suffix == '.zst':
            dctx = zstandard.ZstdDecompressor()
            yield stack.enter_context(dctx.stream_reader(fileobj))
        else:
            yield fileobj


def read_numbered_lines(path, fileobj=None):
    """
    Read all non-blank lines of an NMEA log with their line numbers.

    Line endings (LF or CRLF) are removed. Bytes which aren't valid UTF-8 are
    kept as surrogate escapes so checksums are computed over the original
    bytes.

    Returns a list of (1-based line number, str) tuples. Raises
    errors.FileError if the file can't be opened or decompressed.
    """
    try:
        with file_open_r(path, fileobj) as fh:
            data = fh.read()
    except (OSError, zlib.error, zstandard.ZstdError) as e:
        raise errors.FileError("could not read {}: {}".format(path, e)) from e

    numbered = []
    text = data.decode(encoding, errors="surrogateescape")
    for i, line in enumerate(text.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]
        if line:
            numbered.append((i, line))
    logger.debug("read %d lines from %s", len(numbered), path)
    return numbered


def read_lines(path, fileobj=None):
    """Read all non-blank lines of an NMEA log, see read_numbered_lines()."""
    return [line for _, line in read_numbered_lines(path, fileobj)]
