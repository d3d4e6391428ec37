from __future__ import annotations

import re
import unicodedata
from typing import List

PUNCTUATION_RE = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()?\"«»—]")
EXTRA_SPACES_RE = re.compile(r"\s{2,}")
WHITESPACE_RE = re.compile(r"\s+")
LETTER_RE = re.compile(r"[a-záàâãéêíóôõúüç]", re.IGNORECASE)


def split_words(text: str) -> List[str]:
    """Split text into raw word tokens on runs of whitespace, kept as typed."""
    return [word for word in WHITESPACE_RE.split((text or "").strip()) if word]


def normalize_for_comparison(text: str | None) -> str:
    """
    Lower-case and strip punctuation so words compare by content only.
    Portuguese accented letters are kept.
    """
    if not text:
        return ""
    normalized = unicodedata.normalize("NFC", text).lower()
    normalized = PUNCTUATION_RE.sub("", normalized)
    normalized = EXTRA_SPACES_RE.sub(" ", normalized)
    return normalized.strip()


def is_letter(char: str) -> bool:
    """Return True when char is a single Portuguese letter."""
    return len(char) == 1 and LETTER_RE.match(char) is not None
