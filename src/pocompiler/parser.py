import logging
from typing import Any

import polib

from pocompiler.classes import (
    NO_CONTEXT,
    Catalog,
    CompilerOptions,
    TranslationItem,
)
from pocompiler.entities import normalize_entities
from pocompiler.errors import MissingLanguageError

logger = logging.getLogger(__name__)


def _translation_item(entry: polib.POEntry) -> TranslationItem:
    if entry.msgstr_plural:
        msgstr = [
            entry.msgstr_plural[index] for index in sorted(entry.msgstr_plural)
        ]
    elif entry.msgid_plural:
        msgstr = [""]
    else:
        msgstr = [entry.msgstr]
    return TranslationItem(
        msgid=entry.msgid,
        msgstr=msgstr,
        msgctxt=entry.msgctxt,
        flags=set(entry.flags),
        obsolete=bool(entry.obsolete),
    )


def parse_catalog(text: str) -> Catalog:
    # polib raises OSError on syntax errors; it is left to the caller
    po = polib.pofile(text, wrapwidth=-1)
    return Catalog(
        headers=dict(po.metadata),
        items=[_translation_item(entry) for entry in po],
    )


def extract_item(
    item: TranslationItem, options: CompilerOptions, filename: str | None = None
) -> tuple[str, str, Any] | None:
    """Turn one catalog item into a ``(key, context, value)`` triple.

    Returns None for untranslated and obsolete items, and for fuzzy ones unless
    ``options.ignore_fuzzy_strings`` is off. Singular values go through
    ``options.process_msg``; plural forms are kept as the raw list.
    """
    if not item.msgstr or not item.msgstr[0] or item.obsolete:
        return None
    if options.ignore_fuzzy_strings and item.fuzzy:
        return None

    key = normalize_entities(item.msgid)
    context = item.msgctxt or NO_CONTEXT
    if len(item.msgstr) == 1:
        value: Any = options.process_msg(item.msgstr[0], item.msgid, filename)
    else:
        value = list(item.msgstr)
    return key, context, value


def extract_strings(
    catalog: Catalog, options: CompilerOptions, filename: str | None = None
) -> dict[str, Any]:
    if not catalog.language:
        raise MissingLanguageError(filename)

    strings: dict[str, Any] = {}
    skipped = 0
    for item in catalog.items:
        extracted = extract_item(item, options, filename)
        if extracted is None:
            skipped += 1
            continue
        key, context, value = extracted
        strings.setdefault(key, {})[context] = value

    # Strip the context layer from strings that only exist without one
    for key, contexts in strings.items():
        if len(contexts) == 1 and NO_CONTEXT in contexts:
            strings[key] = contexts[NO_CONTEXT]

    if options.sort:
        strings = {key: strings[key] for key in sorted(strings)}

    logger.debug(
        f"Extracted {len(strings)} strings for {catalog.language}"
        f" ({skipped} items skipped) from {filename or '<input>'}"
    )
    return strings
