# src/utils/naming.py

import re

_PARENS = re.compile(r"[()]")
_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9-]")
_HYPHENS = re.compile(r"-{2,}")
_WORD = re.compile(r"[A-Za-z0-9]+")


def to_path_slug(text: str) -> str:
    """
    Hyphenated, lowercase URL path segment.

    "Offices of Physicians (except Mental Health Specialists)"
        -> "offices-of-physicians-except-mental-health-specialists"

    Empty after stripping -> "" (callers decide what that means).
    """
    s = _PARENS.sub("", (text or "").lower())
    s = _WHITESPACE.sub("-", s.strip())
    s = _NON_SLUG.sub("", s)
    s = _HYPHENS.sub("-", s)
    return s.strip("-")


def to_identifier(text: str) -> str:
    """
    PascalCase symbol name: "Full-Service Restaurants" -> "FullServiceRestaurants".
    """
    words = _WORD.findall(text or "")
    return "".join(w[0].upper() + w[1:] for w in words)


def to_variable_name(text: str) -> str:
    ident = to_identifier(text)
    if not ident:
        return ""
    return ident[0].lower() + ident[1:]


def to_mdx_filename(text: str) -> str:
    return f"{to_identifier(text)}.mdx"
