from ..exceptions import EncodingDetectionError
from .codec import decode_text_with_fallback

__all__ = [
    "EncodingDetectionError",
    "decode_text_with_fallback",
]
