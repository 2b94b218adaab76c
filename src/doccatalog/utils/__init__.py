"""Presentation helpers for DocCatalog."""

from doccatalog.utils.formatting import format_size, format_upload_date
from doccatalog.utils.icons import Icon, classify_icon
from doccatalog.utils.mime import guess_type

__all__ = ["format_size", "format_upload_date", "Icon", "classify_icon", "guess_type"]
