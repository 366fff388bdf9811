import dataclasses
import logging
from typing import Any, Sequence

from pocompiler import formats, parser
from pocompiler.classes import CompilerOptions
from pocompiler.errors import InvalidOptionsError

logger = logging.getLogger(__name__)


class Compiler:
    def __init__(self, options: CompilerOptions | None = None, **overrides: Any) -> None:
        options = options or CompilerOptions()
        if overrides:
            options = dataclasses.replace(options, **overrides)
        self.options = options
        self.format = formats.get_format(options.format)
        if (
            options.format == "javascript"
            and options.requirejs
            and not options.module_path
        ):
            raise InvalidOptionsError("requirejs output needs a module path")

    @staticmethod
    def has_format(name: str) -> bool:
        return formats.has_format(name)

    def convert_po(
        self, inputs: Sequence[str], file_names: Sequence[str] | None = None
    ) -> str:
        locales = []
        for idx, text in enumerate(inputs):
            filename = file_names[idx] if file_names and idx < len(file_names) else None
            catalog = parser.parse_catalog(text)
            strings = parser.extract_strings(catalog, self.options, filename)
            locales.append(
                self.format.add_locale(catalog.language, strings, self.options)
            )

        logger.info(f"Compiled {len(locales)} catalogs as {self.options.format}")
        return self.format.format(locales, self.options)
