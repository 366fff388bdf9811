from dataclasses import dataclass, field
from typing import Any, Callable

NO_CONTEXT = "$$noContext"

ProcessMsg = Callable[[str, str, str | None], str]


def identity(string: str, msgid: str, filename: str | None = None) -> str:
    return string


@dataclass
class TranslationItem:
    msgid: str
    msgstr: list[str]
    msgctxt: str | None = None
    flags: set[str] = field(default_factory=set)
    obsolete: bool = False

    @property
    def fuzzy(self) -> bool:
        return "fuzzy" in self.flags


@dataclass
class Catalog:
    headers: dict[str, str]
    items: list[TranslationItem]

    @property
    def language(self) -> str | None:
        return self.headers.get("Language") or None


@dataclass
class Locale:
    name: str
    strings: dict[str, Any]


@dataclass(frozen=True)
class CompilerOptions:
    format: str = "javascript"
    ignore_fuzzy_strings: bool = True
    module: str = "gettext"
    process_msg: ProcessMsg = identity
    sort: bool = False
    multiline: bool = False
    browserify: bool = False
    requirejs: bool = False
    module_path: str | None = None
    default_language: str | None = None
