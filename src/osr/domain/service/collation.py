"""Name ordering used by every sorted report listing.

Names compare case-insensitively on their NFKD-decomposed form, so
"élan" sorts next to "Elan" rather than after "Zed".  Ties are broken
lowercase-first ("apple" before "Apple") so the order is reproducible
across platforms.
"""

from __future__ import annotations

import unicodedata


def collation_key(name: str) -> tuple[str, str]:
    decomposed = unicodedata.normalize("NFKD", name)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return folded.casefold(), name.swapcase()
