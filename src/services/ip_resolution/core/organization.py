"""
Organization Name Formatting

Turns a raw AS organization string into a short company name,
e.g. "AS906 DMIT Cloud Services, Inc." -> "DMIT Cloud Services".
"""

from __future__ import annotations

_WHITESPACE = " \t"

# Checked in order; only the first match is stripped
COMPANY_SUFFIXES: tuple[str, ...] = (
    " Inc.",
    " LLC",
    " Ltd.",
    " Corp.",
    " Corporation",
    " Services",
)


def format_organization(raw: str) -> str:
    """
    Derive a short display name from an AS organization string.

    Args:
        raw: Organization as reported by the lookup service

    Returns:
        Shortened name, or ``raw`` unchanged if nothing is left
    """
    name = raw.strip(_WHITESPACE)

    # Drop the AS number token
    if name.startswith("AS"):
        space = name.find(" ")
        if space != -1:
            name = name[space + 1 :].lstrip(_WHITESPACE)

    comma = name.find(",")
    if comma != -1:
        prefix = name[:comma].rstrip(_WHITESPACE)
        if prefix:
            # The legal form already went with the comma tail
            return prefix

    for suffix in COMPANY_SUFFIXES:
        if name.endswith(suffix):
            name = name[: -len(suffix)].rstrip(_WHITESPACE)
            break

    return name or raw
