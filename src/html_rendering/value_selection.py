# src/html_rendering/value_selection.py
import logging
from typing import Any, Optional

# ========================================
# Function: first_non_blank
# Description: Picks the first candidate that is not None and not blank after trimming.
# ========================================
def first_non_blank(values: Any, strip: bool = True) -> Optional[str]:
    """
    Returns the first usable candidate from a single value or an ordered list of values.

    A candidate is usable when it is not None and its string form is not empty
    after stripping whitespace. Lists and tuples are scanned in order; any other
    value is treated as a one-element list.

    Args:
        values: A scalar value or a list/tuple of candidate values.
        strip: Return the winner trimmed (default) or with its whitespace kept.

    Returns:
        The string form of the first usable candidate, or None if there is none.
    """
    candidates = values if isinstance(values, (list, tuple)) else [values]
    for candidate in candidates:
        if candidate is None:
            continue
        text = str(candidate)
        if text.strip():
            return text.strip() if strip else text
    logging.debug(f"No non-blank value among candidates: {candidates!r}")
    return None

# ========================================
# Function: format_dimension
# Description: Stringifies a video dimension as a plain integer.
# ========================================
def format_dimension(value: Any) -> Optional[str]:
    """
    Stringifies a numeric dimension without decimals (10, 10.0 and "10" all give "10").

    Ints are written as-is. Floats and numeric strings are accepted only when
    integral; fractional, infinite or non-numeric values are logged and dropped.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)

    text = str(value).strip()
    if not text:
        return None
    try:
        return str(int(text))
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        logging.warning(f"Ignoring non-numeric video dimension: {value!r}")
        return None
    if not number.is_integer():
        logging.warning(f"Ignoring non-integral video dimension: {value!r}")
        return None
    return str(int(number))
