from markdown_it import MarkdownIt

# Rules enabled on top of the CommonMark preset (GFM-style tables and ~~strike~~)
EXTRA_RULES = ["table", "strikethrough"]


def build_parser(*, linkify: bool = True) -> MarkdownIt:
    """Build the shared markdown-it parser.

    ``linkify`` turns bare URLs into links, as the markdown-it harness did
    (requires ``linkify-it-py``).
    """
    md = MarkdownIt("commonmark", {"linkify": linkify})
    md.enable(EXTRA_RULES)
    if linkify:
        md.enable("linkify")
    return md
