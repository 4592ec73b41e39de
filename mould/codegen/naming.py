"""Key and title derivation shared by every generated artefact."""

from __future__ import annotations

from typing import Tuple


def title_case(text: str) -> str:
    """
    Upper-case the first letter of every word, leaving the rest untouched.

    A word starts at any character not preceded by a letter, digit or
    underscore, so ``"sticker sheet"`` becomes ``"Sticker Sheet"`` and
    ``"iPhone model"`` becomes ``"IPhone Model"``.
    """
    chars = []
    previous = " "
    for char in text:
        if not (previous.isalnum() or previous == "_"):
            char = char.upper()
        chars.append(char)
        previous = char
    return "".join(chars)


def _collapse(text: str) -> str:
    return "".join(text.split())


def derive_key_and_title(title: str, key: str = "") -> Tuple[str, str]:
    """
    Resolve the wire key and the generated attribute name of a field.

    Without an explicit key the key is the lower-cased title and the
    attribute name is the title-cased title with whitespace removed. An
    explicit key is used verbatim, and the attribute name is derived from
    it with hyphens treated as word boundaries.

    >>> derive_key_and_title("Sticker Sheet Amount")
    ('sticker sheet amount', 'StickerSheetAmount')
    >>> derive_key_and_title("The rabbit boat but backwards", "access-token")
    ('access-token', 'AccessToken')
    """
    if key:
        return key, _collapse(title_case(key.replace("-", " ")))
    return title.lower(), _collapse(title_case(title))


__all__ = ["derive_key_and_title", "title_case"]
