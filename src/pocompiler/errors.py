# polib parse failures are not wrapped


class CompilerError(Exception):
    pass


class MissingLanguageError(CompilerError):
    def __init__(self, filename: str | None = None) -> None:
        super().__init__("No Language header found!")
        self.filename = filename


class UnsupportedFormatError(CompilerError, ValueError):
    def __init__(self, format: str) -> None:
        super().__init__(f'Unsupported output format "{format}"')
        self.format = format


class InvalidOptionsError(CompilerError, ValueError):
    pass
