# 19.10.26

from .m3u import PlaylistExtractor, parse_m3u_content, extract

__all__ = [
    "PlaylistExtractor",
    "parse_m3u_content",
    "extract"
]
