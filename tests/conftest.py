"""Shared catalog fixtures for the compiler test suite."""

import pytest

from tests.po_fixtures import make_po


@pytest.fixture
def hello_po() -> str:
    return make_po('msgid "Hello"\nmsgstr "Bonjour"\n')


@pytest.fixture
def mixed_po() -> str:
    return make_po(
        'msgid "Hello"\nmsgstr "Bonjour"\n\n'
        'msgid "Empty"\nmsgstr ""\n\n'
        '#, fuzzy\nmsgid "Maybe"\nmsgstr "Peut-être"\n\n'
        'msgid "1 item"\nmsgid_plural "%d items"\n'
        'msgstr[0] "1 élément"\nmsgstr[1] "%d éléments"\n\n'
        '#~ msgid "Old"\n#~ msgstr "Ancien"\n'
    )
