"""Markdown to styled text segments.

Produces the flat run-of-styled-text model a native text view consumes: every
piece of inline text becomes a segment carrying its resolved style. Fenced code
is split into syntax-highlighted runs with Pygments. Segments are written to the
sink as JSON Lines.
"""

import json
import logging
from collections.abc import Iterator
from dataclasses import asdict, dataclass, field, replace
from functools import lru_cache

from markdown_it.token import Token
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.style import StyleMeta
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from ..encoding import decode_text_with_fallback
from .base import Transformation
from .parser import build_parser

logger = logging.getLogger(__name__)

BASE_FONT_SIZE = 18.0
HEADING_FONT_SIZES: dict[int, float] = {
    1: 46.8,
    2: 39.6,
    3: 32.4,
    4: 23.4,
    5: 18.0,
    6: 15.3,
}
LINK_COLOR = "#007aff"
CODE_THEME = "default"


@dataclass(frozen=True)
class SegmentOptions:
    """Rendering knobs for the segments output."""

    base_font_size: float = BASE_FONT_SIZE
    heading_font_sizes: dict[int, float] = field(default_factory=lambda: dict(HEADING_FONT_SIZES))
    link_color: str = LINK_COLOR
    # Any Pygments style name, e.g. "monokai"
    code_theme: str = CODE_THEME

    def heading_size(self, level: int) -> float:
        return self.heading_font_sizes.get(level, self.base_font_size)


@dataclass(frozen=True)
class TextStyle:
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    code: bool = False
    heading: int | None = None
    font_size: float = BASE_FONT_SIZE
    link: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class TextSegment:
    text: str
    style: TextStyle
    language: str | None = None

    def to_dict(self) -> dict[str, object]:
        d: dict[str, object] = {"text": self.text, **asdict(self.style)}
        if self.language is not None:
            d["language"] = self.language
        return d


@lru_cache(maxsize=64)
def _lexer_for(language: str | None) -> Lexer:
    if language:
        try:
            return get_lexer_by_name(language, stripnl=False, ensurenl=False)
        except ClassNotFound:
            logger.debug("No lexer for %r, highlighting as plain text", language)
    return TextLexer(stripnl=False, ensurenl=False)


@lru_cache(maxsize=16)
def _style_for(theme: str) -> StyleMeta:
    return get_style_by_name(theme)


def highlight_runs(
    code: str, language: str | None, theme: str
) -> Iterator[tuple[str, str | None]]:
    """Yield ``(text, color)`` runs for ``code``.

    Neighbouring Pygments tokens of one colour are merged. Unknown languages are
    lexed as plain text. ``color`` is ``#rrggbb`` or None when the theme sets none.
    """
    style = _style_for(theme)
    text, color = "", None
    for ttype, value in _lexer_for(language).get_tokens(code):
        if not value:
            continue
        hex_color = style.style_for_token(ttype)["color"]
        token_color = f"#{hex_color}" if hex_color else None
        if text and token_color != color:
            yield text, color
            text = ""
        text += value
        color = token_color
    if text:
        yield text, color


class _SegmentBuilder:
    """Walks the markdown-it token stream keeping a stack of active styles."""

    def __init__(self, options: SegmentOptions) -> None:
        self.options = options
        self.segments: list[TextSegment] = []
        self._styles: list[TextStyle] = [TextStyle(font_size=options.base_font_size)]
        self._pending_breaks = ""
        self._row = 0
        self._cell = 0

    @property
    def style(self) -> TextStyle:
        return self._styles[-1]

    def push(self, **changes: object) -> None:
        self._styles.append(replace(self.style, **changes))  # type: ignore[arg-type]

    def pop(self) -> None:
        if len(self._styles) > 1:
            self._styles.pop()

    def add_break(self, text: str) -> None:
        self._pending_breaks += text

    def emit(
        self, text: str, *, style: TextStyle | None = None, language: str | None = None
    ) -> None:
        if not text:
            return
        content = self._pending_breaks + text
        self._pending_breaks = ""
        style = style or self.style
        last = self.segments[-1] if self.segments else None
        # Adjacent runs with the same style collapse into one segment
        if last is not None and last.style == style and last.language is None and language is None:
            self.segments[-1] = replace(last, text=last.text + content)
        else:
            self.segments.append(TextSegment(content, style, language))

    def walk(self, tokens: list[Token]) -> None:
        for token in tokens:
            t = token.type
            if t == "heading_open":
                level = int(token.tag[1:])
                self.push(bold=True, heading=level, font_size=self.options.heading_size(level))
            elif t == "heading_close":
                self.pop()
                self.add_break("\n\n")
            elif t == "paragraph_close":
                self.add_break("\n\n")
            elif t in ("fence", "code_block"):
                self._code_block(token)
            elif t == "table_open":
                self._row = 0
            elif t == "thead_open":
                self.push(bold=True)
            elif t == "thead_close":
                self.pop()
            elif t == "tr_open":
                if self._row:
                    self.add_break("\n")
                self._row += 1
                self._cell = 0
            elif t in ("th_open", "td_open"):
                # Cells are tab separated, rows newline separated
                if self._cell:
                    self.add_break("\t")
                self._cell += 1
            elif t == "table_close":
                self.add_break("\n\n")
            elif t == "inline" and token.children:
                self._walk_inline(token.children)

    def _code_block(self, token: Token) -> None:
        lang = token.info.strip().split(" ", 1)[0] if token.info else ""
        language = lang or None
        code_style = replace(self.style, code=True)
        for text, color in highlight_runs(token.content, language, self.options.code_theme):
            self.emit(text, style=replace(code_style, color=color), language=language)
        self.add_break("\n")

    def _walk_inline(self, children: list[Token]) -> None:
        for child in children:
            t = child.type
            if t == "text":
                self.emit(child.content)
            elif t == "code_inline":
                self.emit(child.content, style=replace(self.style, code=True))
            elif t in ("softbreak", "hardbreak"):
                self.add_break("\n")
            elif t == "strong_open":
                self.push(bold=True)
            elif t == "em_open":
                self.push(italic=True)
            elif t == "s_open":
                self.push(strikethrough=True)
            elif t == "link_open":
                self.push(link=str(child.attrGet("href") or ""), color=self.options.link_color)
            elif t in ("strong_close", "em_close", "s_close", "link_close"):
                self.pop()
            elif t == "image":
                self.emit(child.content)


def parse_segments(
    tokens: list[Token], options: SegmentOptions | None = None
) -> list[TextSegment]:
    builder = _SegmentBuilder(options or SegmentOptions())
    builder.walk(tokens)
    return builder.segments


class SegmentsTransformation(Transformation):
    """Markdown to styled text segments (JSON Lines)."""

    name = "segments"

    def __init__(self, *, linkify: bool = True, options: SegmentOptions | None = None) -> None:
        self._md = build_parser(linkify=linkify)
        self.options = options or SegmentOptions()
        # Raises ClassNotFound for an unknown theme
        _style_for(self.options.code_theme)

    def transform(self, source: bytes, sink: bytearray) -> int:
        text, _ = decode_text_with_fallback(source)
        start = len(sink)
        for segment in parse_segments(self._md.parse(text), self.options):
            sink += json.dumps(segment.to_dict(), ensure_ascii=False).encode("utf-8")
            sink += b"\n"
        return len(sink) - start
