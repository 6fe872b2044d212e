"""
Utilities shared across the bigdecimal package.

Contains the formatting helpers used to build exception messages, kept here to avoid
circular imports between the value type and its parser/formatter.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Builtins are never module-qualified, so `class_name(10)` and `class_name(int)`
    both return 'int'.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(BigDecimal(1), fully_qualified=True)
        'bigdecimal.core.BigDecimal'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{cls.__name__}"
    return cls.__name__


def fmt_type(obj: Any) -> str:
    """Format type information of an object or a type for exception messages.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(float)
        '<type: float>'
    """
    return f"<type: {class_name(obj)}>"


def fmt_value(x: Any, *, max_repr: int = 80) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Broken `__repr__` methods are tolerated, long reprs are truncated with "...".

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("G2x")
        "<str: 'G2x'>"
    """
    t = class_name(x)
    try:
        r = repr(x)
    except Exception as e:
        r = f"<{t} object (repr failed: {type(e).__name__})>"

    if max_repr >= 3 and len(r) > max_repr:
        r = r[:max_repr - 3] + "..."
    return f"<{t}: {r}>"
