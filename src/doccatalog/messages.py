"""User-facing strings, per display locale.

Lookup falls back to the default locale, then to the key itself.
"""

DEFAULT_LOCALE = "ru"

MESSAGES: dict[str, dict[str, str]] = {
    "uploaded": {
        "ru": "Загружено файлов: {count}",
        "en": "{count} files uploaded",
    },
    "removed": {
        "ru": "Файл удалён",
        "en": "File removed",
    },
    "cleared": {
        "ru": "Каталог очищен",
        "en": "Catalog cleared",
    },
    "title": {
        "ru": "Документы",
        "en": "Documents",
    },
    "subtitle": {
        "ru": "Загружайте и управляйте вашими файлами",
        "en": "Upload and manage your files",
    },
    "search_placeholder": {
        "ru": "Поиск документов...",
        "en": "Search documents...",
    },
    "drop_placeholder": {
        "ru": "Перетащите файлы сюда (путь к файлу, папке или .zip)",
        "en": "Drop files here (file, folder or .zip path)",
    },
    "empty_catalog": {
        "ru": "Загрузите первый документ",
        "en": "Upload your first document",
    },
    "nothing_found": {
        "ru": "Ничего не найдено",
        "en": "Nothing found",
    },
    "unreadable": {
        "ru": "Не удалось прочитать: {path}",
        "en": "Cannot read: {path}",
    },
    "catalog_heading": {
        "ru": "КАТАЛОГ",
        "en": "CATALOG",
    },
    "files_heading": {
        "ru": "ФАЙЛЫ",
        "en": "FILES",
    },
    "log_heading": {
        "ru": "ЖУРНАЛ",
        "en": "LOG",
    },
    "upload_button": {
        "ru": "Загрузить",
        "en": "Upload",
    },
    "clear_button": {
        "ru": "Очистить",
        "en": "Clear",
    },
    "column_name": {
        "ru": "Имя",
        "en": "Name",
    },
    "column_size": {
        "ru": "Размер",
        "en": "Size",
    },
    "column_date": {
        "ru": "Дата",
        "en": "Date",
    },
    "stats_documents": {
        "ru": "ДОКУМЕНТЫ",
        "en": "DOCUMENTS",
    },
    "stats_size": {
        "ru": "РАЗМЕР",
        "en": "SIZE",
    },
    "stats_total": {
        "ru": "Всего",
        "en": "Total",
    },
    "stats_visible": {
        "ru": "Показано",
        "en": "Visible",
    },
    "deck_ready": {
        "ru": "Каталог готов",
        "en": "Deck initialized",
    },
}

# Abbreviated month names as used on document cards ("17 окт.", "Oct 17").
MONTHS_SHORT: dict[str, tuple[str, ...]] = {
    "ru": (
        "янв.", "февр.", "мар.", "апр.", "мая", "июн.",
        "июл.", "авг.", "сент.", "окт.", "нояб.", "дек.",
    ),
    "en": (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
}

SUPPORTED_LOCALES = tuple(MONTHS_SHORT)


def resolve_locale(locale: str | None) -> str:
    """Map an arbitrary locale tag ("ru-RU", "en_US", None) to a supported one."""
    if not locale:
        return DEFAULT_LOCALE
    language = locale.replace("_", "-").split("-")[0].lower()
    return language if language in SUPPORTED_LOCALES else DEFAULT_LOCALE


def translate(key: str, locale: str | None = None, **params: object) -> str:
    """Look up a message and fill in its placeholders."""
    variants = MESSAGES.get(key)
    if variants is None:
        return key
    template = variants.get(resolve_locale(locale)) or variants[DEFAULT_LOCALE]
    return template.format(**params) if params else template
