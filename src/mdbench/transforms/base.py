from abc import ABC, abstractmethod


class Transformation(ABC):
    """A unit of work the harness can time.

    Subclasses must define:
        name: Identifier used by the registry and in error messages
        transform(): Convert ``source`` and append the result to ``sink``

    Contract for ``transform``:
        - ``source`` is never mutated and no reference to it is kept.
        - Output is appended to ``sink``; existing contents are left alone.
        - Calling it repeatedly against the same sink must work without any
          reset of internal state in between.
        - Failure is signalled by raising (preferably ``TransformationError``).
    """

    name: str = "base"

    @abstractmethod
    def transform(self, source: bytes, sink: bytearray) -> int:
        """Transform ``source`` into ``sink`` and return the number of bytes appended."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
