import functools
import os
import sys
from pathlib import Path


def mkdir_p(path):
    """Create directory tree for path."""
    Path(path).mkdir(exist_ok=True, parents=True)


def suppress_sigpipe(f):
    """
    Decorator to quietly stop writing when stdout is closed early.

    e.g. when output is piped to `head`. Python flushes stdout again at exit,
    so stdout is pointed at devnull to avoid a second BrokenPipeError.
    """
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except BrokenPipeError:
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
    return wrapper


def expand_file_list(files_and_dirs: list[str]) -> list[str]:
    """
    Return files_and_dirs with directories replaced by the files they contain

    For example, ["file1", "file2", "dir1"] becomes
    ["file1", "file2", "dir1/file3"]. Directory contents are sorted so files
    are processed in a stable order. Paths which are neither files nor
    directories are kept so the caller can report them.
    """
    expanded = []
    for f in files_and_dirs:
        p = Path(f)
        if p.is_dir():
            expanded.extend(sorted(str(c) for c in p.glob("**/*") if c.is_file()))
        else:
            expanded.append(f)
    return expanded
