# 19.10.26

from .version import __title__, __version__
from .core.drm.codec import base64_to_hex, KeyDecodeError
from .core.parser.m3u import PlaylistExtractor, parse_m3u_content, extract
from .source.utils.object import StreamRecord, DiagnosticKind, DiagnosticEvent, ExtractionResult

__all__ = [
    "__title__",
    "__version__",
    "base64_to_hex",
    "KeyDecodeError",
    "PlaylistExtractor",
    "parse_m3u_content",
    "extract",
    "StreamRecord",
    "DiagnosticKind",
    "DiagnosticEvent",
    "ExtractionResult"
]
