"""KQL utilities for safe identifier quoting."""

import re

# Identifiers made of letters, digits and underscores that don't start with a digit
SIMPLE_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def quote_ident(name: str) -> str:
    """Quote a KQL entity name if necessary.

    Parameters
    ----------
    name : str
        The entity name to quote

    Returns
    -------
    str
        The bracket-quoted name if needed, otherwise the original

    Raises
    ------
    ValueError
        If the name is empty or whitespace-only

    Examples
    --------
    >>> quote_ident("StormEvents")
    'StormEvents'
    >>> quote_ident("my table")
    "['my table']"
    """
    trimmed = name.strip()

    if not trimmed:
        raise ValueError("Empty identifier")

    if SIMPLE_IDENTIFIER_PATTERN.match(trimmed):
        return trimmed

    escaped = trimmed.replace("\\", "\\\\").replace("'", "\\'")
    return f"['{escaped}']"
