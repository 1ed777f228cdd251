import codecs
import logging

from charset_normalizer import from_bytes

from ..exceptions import EncodingDetectionError

logger = logging.getLogger(__name__)

# 優先嘗試的編碼（Markdown 幾乎都是 UTF-8）
PREFERRED_ENCODINGS = ("utf-8",)

# charset_normalizer 結果的最低可信度
MIN_COHERENCE = 0.5


def decode_text_with_fallback(raw: bytes) -> tuple[str, str]:
    """將輸入 buffer 解碼為文字，自動偵測編碼。

    優先嘗試 UTF-8（會去除 BOM），
    失敗時使用 charset_normalizer 自動偵測。

    Args:
        raw: 原始位元組。

    Returns:
        (內容, 編碼) 元組。

    Raises:
        EncodingDetectionError: 若無法偵測編碼或內容非文字。
    """
    if raw.startswith(codecs.BOM_UTF8):
        raw = raw[len(codecs.BOM_UTF8) :]

    for enc in PREFERRED_ENCODINGS:
        try:
            return raw.decode(enc), enc
        except (UnicodeDecodeError, LookupError):
            continue

    # Fallback：自動偵測
    best = from_bytes(raw).best()
    if best is None or best.coherence < MIN_COHERENCE:
        raise EncodingDetectionError(f"{len(raw)} bytes, no coherent text encoding found")
    logger.debug("Detected encoding %s (coherence=%.2f)", best.encoding, best.coherence)
    return str(best), best.encoding
