"""file: URL handling."""

from __future__ import annotations

import os
import re
import sys
from typing import Union
from urllib.parse import ParseResult, SplitResult, urlsplit
from urllib.request import url2pathname

from to_vfile.errors import InvalidURLError

URLLike = Union[str, ParseResult, SplitResult]

_ENCODED_SLASH = re.compile(r"%2f", re.IGNORECASE)
_ENCODED_BACKSLASH = re.compile(r"%5c", re.IGNORECASE)


def file_url_to_path(url: URLLike) -> str:
    """Convert a ``file:`` URL to a local filesystem path.

    Accepts a URL string or an already parsed URL. The host must be empty or
    ``localhost`` except on Windows, where it names a UNC share.
    """
    if isinstance(url, str):
        url = urlsplit(url)

    if url.scheme != "file":
        raise InvalidURLError(f"The URL must be of scheme file, got {url.scheme!r}")

    host = url.netloc
    if host.lower() == "localhost":
        host = ""

    pathname = url.path
    if _ENCODED_SLASH.search(pathname) or (os.name == "nt" and _ENCODED_BACKSLASH.search(pathname)):
        raise InvalidURLError("File URL path must not include encoded \\ or / characters")

    if host:
        if os.name != "nt":
            raise InvalidURLError(f'File URL host must be "localhost" or empty on {sys.platform}')
        return "\\\\" + host + url2pathname(pathname)

    return url2pathname(pathname)
