import json
from abc import ABC, abstractmethod
from typing import Any

from pocompiler.classes import CompilerOptions, Locale
from pocompiler.errors import UnsupportedFormatError


class Format(ABC):
    name: str

    @abstractmethod
    def add_locale(
        self, language: str, strings: dict[str, Any], options: CompilerOptions
    ) -> Any:
        pass

    @abstractmethod
    def format(self, locales: list[Any], options: CompilerOptions) -> str:
        pass


class JavascriptFormat(Format):
    name = "javascript"

    def add_locale(
        self, language: str, strings: dict[str, Any], options: CompilerOptions
    ) -> str:
        if options.multiline:
            serialized = json.dumps(strings, ensure_ascii=False, indent=2)
        else:
            serialized = json.dumps(strings, ensure_ascii=False, separators=(",", ":"))
        return f"    gettextCatalog.setStrings('{language}', {serialized});\n"

    def format(self, locales: list[str], options: CompilerOptions) -> str:
        angular = "require('angular')" if options.browserify else "angular"
        module = (
            f"{angular}.module('{options.module}')"
            ".run(['gettextCatalog', function (gettextCatalog) {\n"
            "/* jshint -W100 */\n"
            + "".join(locales)
            + "/* jshint +W100 */\n"
        )
        if options.default_language:
            module += f"gettextCatalog.currentLanguage = '{options.default_language}';\n"
        module += "}]);"

        if options.requirejs:
            return (
                f"define(['angular', '{options.module_path}'], function (angular) {{\n"
                f"{module}\n}});"
            )
        return module


class JsonFormat(Format):
    name = "json"

    def add_locale(
        self, language: str, strings: dict[str, Any], options: CompilerOptions
    ) -> Locale:
        return Locale(language, strings)

    def format(self, locales: list[Locale], options: CompilerOptions) -> str:
        result: dict[str, dict[str, Any]] = {}
        for locale in locales:
            result.setdefault(locale.name, {}).update(locale.strings)
        return json.dumps(result, ensure_ascii=False, separators=(",", ":"))


FORMATS: dict[str, Format] = {
    fmt.name: fmt for fmt in (JavascriptFormat(), JsonFormat())
}


def has_format(name: str) -> bool:
    return name in FORMATS


def get_format(name: str) -> Format:
    try:
        return FORMATS[name]
    except KeyError:
        raise UnsupportedFormatError(name) from None
