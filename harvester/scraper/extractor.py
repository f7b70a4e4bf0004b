"""Candidate link extraction from raw page text.

Links are found with a plain regular-expression scan rather than an HTML
parser, so matches inside scripts or comments are reported too and markup
left broken by concatenating several pages does not matter.
"""

from __future__ import annotations

import re
from typing import Iterable, List

# href="<anything>.pdf<optional query/fragment>"; the attribute marker is
# literal, the extension matches in any case.
_PDF_HREF = re.compile(r'href="([^"]+\.(?i:pdf)[^"]*)"')


def extract_links(text: str) -> List[str]:
    """Return every PDF ``href`` value in *text*, in order, duplicates kept."""
    return [m.group(1) for m in _PDF_HREF.finditer(text)]


def dedup(items: Iterable[str]) -> List[str]:
    """Drop repeated strings, keeping the first occurrence of each."""
    seen: set[str] = set()
    unique: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique
