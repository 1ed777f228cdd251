from ..encoding import decode_text_with_fallback
from .base import Transformation
from .parser import build_parser


class TokenCountTransformation(Transformation):
    """Parse only; emits the block token count so rendering cost is excluded."""

    name = "tokens"

    def __init__(self, *, linkify: bool = True) -> None:
        self._md = build_parser(linkify=linkify)

    def transform(self, source: bytes, sink: bytearray) -> int:
        text, _ = decode_text_with_fallback(source)
        tokens = self._md.parse(text)
        line = f"{len(tokens)}\n".encode("ascii")
        sink += line
        return len(line)
