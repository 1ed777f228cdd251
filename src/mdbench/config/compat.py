import os

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


def env_bool(name: str, *, default: bool) -> bool:
    """Read a boolean environment variable.

    Empty or unset values return ``default``.

    Raises:
        ValueError: the value is set but is not a recognised boolean.
    """
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw!r} (expected true/false, 1/0, on/off)")
