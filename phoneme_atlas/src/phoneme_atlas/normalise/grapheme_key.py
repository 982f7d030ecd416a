"""Grapheme key normalisation.

Turns an arbitrary orthographic grapheme (any script, any case, with or
without diacritics) into a stable lookup key namespaced by language id,
plus an anchor id derived from that key:

    grapheme_key("ind", "Ng")        -> "ind-ng"
    grapheme_anchor_id("ind", "Ng")  -> "grapheme-ind-ng"

Both functions are total: a grapheme that sanitises to nothing maps to
the ``unknown`` fallback instead of failing.
"""

from __future__ import annotations

import re
import unicodedata

FALLBACK_TOKEN = "unknown"
ANCHOR_PREFIX = "grapheme"

# Combining Diacritical Marks block
_COMBINING_RE = re.compile("[\u0300-\u036f]")

# Tab, line breaks, Zs space separators and U+FEFF. Narrower than
# str.isspace(), which also counts U+001C..U+001F and U+0085.
_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_MULTI_WS_RE = re.compile(f"[{_WHITESPACE}]+")

_MULTI_HYPHEN_RE = re.compile(r"-+")


def _is_key_char(ch: str) -> bool:
    """Unicode letter, Unicode number, whitespace or hyphen."""
    return unicodedata.category(ch)[0] in ("L", "N") or ch == "-" or ch in _WHITESPACE


def strip_combining_marks(text: str) -> str:
    """Decompose to NFD and drop combining diacritical marks."""
    return _COMBINING_RE.sub("", unicodedata.normalize("NFD", text))


def drop_non_key_chars(text: str) -> str:
    """Remove punctuation, symbols and any leftover combining characters."""
    return "".join(ch for ch in text if _is_key_char(ch))


def hyphenate(text: str) -> str:
    """Turn whitespace runs into single hyphens and collapse hyphen runs."""
    return _MULTI_HYPHEN_RE.sub("-", _MULTI_WS_RE.sub("-", text))


def sanitize_grapheme(value: str) -> str:
    """Apply every normalisation step in order; may return ''.

    Diacritics are stripped on the decomposed form before non-key
    characters are filtered out, and separators are collapsed last.
    """
    text = value.strip(_WHITESPACE)
    text = strip_combining_marks(text)
    text = drop_non_key_chars(text)
    text = hyphenate(text)
    return text.lower()


def grapheme_key(language_id: str, grapheme: str) -> str:
    """Return ``{language_id}-{sanitised grapheme or 'unknown'}``."""
    sanitized = sanitize_grapheme(grapheme)
    return f"{language_id}-{sanitized or FALLBACK_TOKEN}"


def grapheme_anchor_id(language_id: str, grapheme: str) -> str:
    return f"{ANCHOR_PREFIX}-{grapheme_key(language_id, grapheme)}"
