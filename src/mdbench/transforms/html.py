from ..encoding import decode_text_with_fallback
from .base import Transformation
from .parser import build_parser


class HtmlTransformation(Transformation):
    """Markdown to HTML via markdown-it-py."""

    name = "html"

    def __init__(self, *, linkify: bool = True) -> None:
        self._md = build_parser(linkify=linkify)

    def transform(self, source: bytes, sink: bytearray) -> int:
        text, _ = decode_text_with_fallback(source)
        rendered = self._md.render(text).encode("utf-8")
        sink += rendered
        return len(rendered)
