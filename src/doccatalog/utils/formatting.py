"""Display formatting for sizes and upload dates."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext

from doccatalog.messages import MONTHS_SHORT, resolve_locale

SIZE_UNITS = ("Bytes", "KB", "MB", "GB")
_STEP = 1024
_CENTS = Decimal("0.01")


def format_size(size: int | float) -> str:
    """Render a byte count with the largest fitting unit.

    Sizes past the last unit stay in GB; anything below one byte
    (including negative counts) is shown in bytes. The value is rounded
    half up to two decimals.

    >>> format_size(1536)
    '1.5 KB'
    """
    if size == 0:
        return "0 Bytes"
    # floor(log1024(size)), capped at the last unit
    index = 0
    while index < len(SIZE_UNITS) - 1 and size >= _STEP ** (index + 1):
        index += 1
    with localcontext() as ctx:
        # exact: dividing by 2**30 adds at most 30 fractional digits
        ctx.prec = len(str(abs(int(size)))) + 34
        value = (Decimal(size) / _STEP**index).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{_trim(value)} {SIZE_UNITS[index]}"


def _trim(value: Decimal) -> str:
    text = f"{value:f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_upload_date(moment: datetime, locale: str | None = None) -> str:
    """Day and abbreviated month, in the order the locale writes them."""
    language = resolve_locale(locale)
    month = MONTHS_SHORT[language][moment.month - 1]
    if language == "en":
        return f"{month} {moment.day}"
    return f"{moment.day} {month}"
