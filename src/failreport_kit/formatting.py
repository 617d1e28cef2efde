import re
from typing import Iterable

DEFAULT_EXTERNAL_MARKERS = ("node_modules",)

# karma and webpack append ?<hash> to served file paths
_CACHE_BUSTER = re.compile(r"\?[^\s:()]+")

def format_error_line(line: str) -> str:
    """Default error formatter: drop trailing whitespace and cache-busting query tokens.

    >>> format_error_line("some/file.js?abcdef:123 ")
    'some/file.js:123'
    """
    return _CACHE_BUSTER.sub("", line.rstrip())

def is_external_frame(line: str, markers: Iterable[str] = DEFAULT_EXTERNAL_MARKERS) -> bool:
    return any(m in line for m in markers)
