"""
String utility functions for tokensmith.

Provides the identifier casings shared by the parser and every generator.
All functions are pure and total over arbitrary input strings.
"""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_SPACE_OR_UNDERSCORE = re.compile(r"[\s_]+")
_INVALID_KEBAB_CHARS = re.compile(r"[^a-zA-Z0-9-]")
_HYPHEN_RUN = re.compile(r"-+")
_CAMEL_SEPARATORS = re.compile(r"[\s_\-]+")


def to_kebab_case(value: str) -> str:
    """
    Convert an arbitrary property-path string to kebab-case.

    Rules, applied in order:
    - insert a hyphen at every lowercase-then-uppercase boundary
    - collapse whitespace/underscore runs to a single hyphen
    - replace any other character outside ``[a-zA-Z0-9-]`` with a hyphen
    - lowercase, collapse repeated hyphens, trim leading/trailing hyphens

    Examples:
        >>> to_kebab_case("skyblueBase")
        'skyblue-base'
        >>> to_kebab_case("Primary Color/100")
        'primary-color-100'
        >>> to_kebab_case("__Gray  50__")
        'gray-50'
    """
    result = _CAMEL_BOUNDARY.sub(r"\1-\2", value)
    result = _SPACE_OR_UNDERSCORE.sub("-", result)
    result = _INVALID_KEBAB_CHARS.sub("-", result)
    result = result.lower()
    result = _HYPHEN_RUN.sub("-", result)
    return result.strip("-")


def to_camel_case(value: str) -> str:
    """
    Convert a hyphen/underscore/space delimited string to camelCase.

    Separators are dropped and the character following each separator run is
    uppercased. The first character is always lowercased.

    Examples:
        >>> to_camel_case("typo-mobile-kr-title1-700")
        'typoMobileKrTitle1700'
        >>> to_camel_case("font_family name")
        'fontFamilyName'
    """
    parts = [part for part in _CAMEL_SEPARATORS.split(value) if part]
    if not parts:
        return ""
    head, *tail = parts
    result = head[0].lower() + head[1:]
    for part in tail:
        result += part[0].upper() + part[1:]
    return result


def strip_hyphens(value: str) -> str:
    """Remove every hyphen (``title1-700`` -> ``title1700``)."""
    return value.replace("-", "")


def capitalize_first(value: str) -> str:
    """Uppercase only the first character, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def font_family_slug(family: str) -> str:
    """Hyphenated key for a font family (``Noto Sans KR`` -> ``noto-sans-kr``)."""
    slug = re.sub(r"\s+", "-", family.lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


def font_family_compact(family: str) -> str:
    """Separator-free key for a font family (``Noto Sans KR`` -> ``notosanskr``)."""
    return re.sub(r"[^a-z0-9]", "", family.lower())


def format_number(value: int | float) -> str:
    """
    Render a number the way CSS expects it.

    Integral floats lose their fractional part so ``16.0`` renders as ``16``.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
