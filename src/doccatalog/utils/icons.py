"""File-type icon classification."""

from enum import Enum


class Icon(str, Enum):
    """Card icons. Values are the icon names the view looks up."""

    IMAGE = "Image"
    FILE_TEXT = "FileText"
    VIDEO = "Video"
    MUSIC = "Music"
    ARCHIVE = "Archive"
    FILE = "File"

    @property
    def glyph(self) -> str:
        """Single-cell symbol used when rendering in a terminal."""
        return _GLYPHS[self]


_GLYPHS = {
    Icon.IMAGE: "🖼",
    Icon.FILE_TEXT: "📄",
    Icon.VIDEO: "🎞",
    Icon.MUSIC: "🎵",
    Icon.ARCHIVE: "📦",
    Icon.FILE: "📃",
}

# Ordered: first match wins. Matching is a case-sensitive substring test.
_RULES: list[tuple[tuple[str, ...], Icon]] = [
    (("image",), Icon.IMAGE),
    (("pdf",), Icon.FILE_TEXT),
    (("video",), Icon.VIDEO),
    (("audio",), Icon.MUSIC),
    (("zip", "rar"), Icon.ARCHIVE),
]


def classify_icon(mime_type: str | None) -> Icon:
    """Pick the card icon for a MIME-like type string."""
    mime_type = mime_type or ""
    for needles, icon in _RULES:
        if any(needle in mime_type for needle in needles):
            return icon
    return Icon.FILE
