#
# Ethunits Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """Format type information for exception messages.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(int)
        '<type: int>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    return f"<type: {getattr(target_type, '__name__', str(target_type))}>"


def fmt_value(x: Any, *, max_repr: int = 120, ellipsis: str = "...") -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Long representations are truncated to max_repr characters, with the ellipsis
    placed outside the quotes of string reprs. A broken __repr__ does not propagate.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("1 ether")
        "<str: '1 ether'>"
        >>> fmt_value("hello world", max_repr=10)
        "<str: 'hello'...>"
    """
    t = type(x).__name__
    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    base_repr = base_repr.replace(">", "\\>")

    if len(base_repr) > max_repr:
        quote = base_repr[0] if base_repr[:1] in ("'", '"') and base_repr[-1:] == base_repr[:1] else ""
        if quote:
            base_repr = base_repr[:max(max_repr - len(ellipsis) - 1, 1)] + quote + ellipsis
        else:
            base_repr = base_repr[:max(max_repr - len(ellipsis), 1)] + ellipsis

    return f"<{t}: {base_repr}>"
