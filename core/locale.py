from __future__ import annotations

from collections.abc import Sequence

from models.status import Translation

DEFAULT_LOCALE = "en_US"


def resolve_locale(
    entries: Sequence[Translation],
    default_locale: str = DEFAULT_LOCALE,
) -> str:
    """Return the text tagged with ``default_locale``, else the first entry's text.

    When several entries carry ``default_locale`` the last one wins.

    ``entries`` must be non-empty; decoded status documents guarantee this.
    """
    if not entries:
        raise ValueError("cannot resolve locale of an empty translation list")
    resolved = entries[0].content
    for entry in entries:
        if entry.locale == default_locale:
            resolved = entry.content
    return resolved
