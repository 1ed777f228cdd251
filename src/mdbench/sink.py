from enum import Enum


class SinkMode(str, Enum):
    """How the shared output sink is treated between repetitions."""

    ACCUMULATE = "accumulate"
    """Never reset; the sink grows across every repetition."""

    RESET = "reset"
    """Clear in place before each repetition after the first."""

    @classmethod
    def parse(cls, value: "str | SinkMode") -> "SinkMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Invalid sink mode {value!r} (expected one of: {choices})") from None
