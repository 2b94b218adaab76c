"""MIME type guessing from file names."""

import mimetypes
from pathlib import Path

# Extensions the platform mimetypes registry is often missing
FALLBACK_TYPES = {
    # Images
    ".webp": "image/webp",
    ".heic": "image/heic",
    ".avif": "image/avif",
    # Documents
    ".md": "text/markdown",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    ".odt": "application/vnd.oasis.opendocument.text",
    # Archives
    ".rar": "application/vnd.rar",
    ".7z": "application/x-7z-compressed",
    ".gz": "application/gzip",
    ".bz2": "application/x-bzip2",
    ".xz": "application/x-xz",
    # Media
    ".mkv": "video/x-matroska",
    ".webm": "video/webm",
    ".flac": "audio/flac",
    ".m4a": "audio/mp4",
    ".ogg": "audio/ogg",
    ".opus": "audio/opus",
}


def guess_type(name: str | Path) -> str:
    """Guess a MIME type from a file name.

    Args:
        name: File name or path; only the name is inspected

    Returns:
        A MIME type string, or "" when unknown (same as a browser would report)
    """
    path = Path(name)
    guessed, _ = mimetypes.guess_type(path.name, strict=False)
    if guessed:
        return guessed
    return FALLBACK_TYPES.get(path.suffix.lower(), "")
