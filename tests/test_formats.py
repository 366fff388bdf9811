import json

import pytest

from pocompiler.classes import CompilerOptions, Locale
from pocompiler.errors import UnsupportedFormatError
from pocompiler.formats import FORMATS, JavascriptFormat, JsonFormat, get_format, has_format


def test_registry_capability_query() -> None:
    assert sorted(FORMATS) == ["javascript", "json"]
    assert has_format("javascript")
    assert has_format("json")
    assert not has_format("yaml")
    assert isinstance(get_format("json"), JsonFormat)


def test_get_format_rejects_unknown_names() -> None:
    with pytest.raises(UnsupportedFormatError) as excinfo:
        get_format("yaml")

    assert excinfo.value.format == "yaml"


def test_javascript_add_locale_compact_and_multiline() -> None:
    fmt = JavascriptFormat()
    strings = {"Hello": "Bonjour"}

    assert (
        fmt.add_locale("fr", strings, CompilerOptions())
        == "    gettextCatalog.setStrings('fr', {\"Hello\":\"Bonjour\"});\n"
    )
    assert (
        fmt.add_locale("fr", strings, CompilerOptions(multiline=True))
        == "    gettextCatalog.setStrings('fr', {\n  \"Hello\": \"Bonjour\"\n});\n"
    )


def test_javascript_format_default_boilerplate() -> None:
    fmt = JavascriptFormat()
    options = CompilerOptions()
    units = [
        fmt.add_locale("fr", {"Hello": "Bonjour"}, options),
        fmt.add_locale("fr", {"Bye": "Au revoir"}, options),
    ]

    assert fmt.format(units, options) == (
        "angular.module('gettext').run(['gettextCatalog', function (gettextCatalog) {\n"
        "/* jshint -W100 */\n"
        "    gettextCatalog.setStrings('fr', {\"Hello\":\"Bonjour\"});\n"
        "    gettextCatalog.setStrings('fr', {\"Bye\":\"Au revoir\"});\n"
        "/* jshint +W100 */\n"
        "}]);"
    )


def test_javascript_format_browserify_default_language_and_requirejs() -> None:
    fmt = JavascriptFormat()
    options = CompilerOptions(
        module="myApp",
        browserify=True,
        default_language="de",
        requirejs=True,
        module_path="./my-app",
    )

    assert fmt.format([], options) == (
        "define(['angular', './my-app'], function (angular) {\n"
        "require('angular').module('myApp')"
        ".run(['gettextCatalog', function (gettextCatalog) {\n"
        "/* jshint -W100 */\n"
        "/* jshint +W100 */\n"
        "gettextCatalog.currentLanguage = 'de';\n"
        "}]);\n"
        "});"
    )


def test_json_add_locale_returns_unit() -> None:
    assert JsonFormat().add_locale("fr", {"a": "b"}, CompilerOptions()) == Locale(
        "fr", {"a": "b"}
    )


def test_json_format_merges_same_language() -> None:
    first = {"Hello": "Bonjour", "Bye": "Au revoir"}
    units = [
        Locale("fr", first),
        Locale("de", {"Hello": "Hallo"}),
        Locale("fr", {"Hello": "Salut", "Yes": "Oui"}),
    ]

    output = JsonFormat().format(units, CompilerOptions())

    assert json.loads(output) == {
        "fr": {"Hello": "Salut", "Bye": "Au revoir", "Yes": "Oui"},
        "de": {"Hello": "Hallo"},
    }
    assert list(json.loads(output)) == ["fr", "de"]
    assert first == {"Hello": "Bonjour", "Bye": "Au revoir"}


def test_json_format_is_compact_utf8() -> None:
    output = JsonFormat().format([Locale("fr", {"Wait…": "Attendez…"})], CompilerOptions())

    assert output == '{"fr":{"Wait…":"Attendez…"}}'
