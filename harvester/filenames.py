"""Map document URLs onto filesystem-safe local file names."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

EXTENSION = ".pdf"

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_UNDERSCORE_RUN = re.compile(r"_+")

# Left behind by the extension once "." has become "_".
_NOISE_TOKENS = ("_pdf",)


def _name_source(url: str) -> str:
    """Pick the part of a lowercased *url* the file name is built from.

    A path that already names a ``.pdf`` file is used on its own, so
    ``x.pdf?v=2`` stays ``x.pdf``.  Anything else keeps its query, since
    ``download.php?file=a.pdf`` and ``download.php?file=b.pdf`` are
    different documents.
    """
    try:
        segment = urlsplit(url).path.rsplit("/", 1)[-1]
    except ValueError:
        segment = ""
    if segment.endswith(EXTENSION):
        return segment
    return url.rsplit("/", 1)[-1]


def sanitize(url: str) -> str:
    """Return the local file name for *url*.

    The result is lowercase, uses only ``[a-z0-9_]`` before the extension,
    never contains ``__`` and always ends in ``.pdf``::

        >>> sanitize("https://cam2.com/data-sheets/Blue-Blood.PDF?v=2")
        'blue_blood.pdf'
        >>> sanitize("https://cam2.com/download.php?file=SDS-A.pdf")
        'download_php_file_sds_a.pdf'

    Every ``_pdf`` is removed, including one in the middle of a name
    (``my_pdf_guide.pdf`` becomes ``my_guide.pdf``).
    """
    name = _name_source(url.lower())
    name = _NON_ALNUM.sub("_", name)
    name = _UNDERSCORE_RUN.sub("_", name)
    name = name.strip("_")

    for token in _NOISE_TOKENS:
        name = name.replace(token, "")

    if not name.endswith(EXTENSION):
        name += EXTENSION
    return name
