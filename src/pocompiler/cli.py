import logging
import os
import pathlib
import sys
from typing import Any

import polib
import yaml

import click
from pocompiler.classes import CompilerOptions
from pocompiler.compiler import Compiler
from pocompiler.errors import CompilerError
from pocompiler.formats import FORMATS

logger = logging.getLogger(__name__)

# config.yml "compiler" keys -> CompilerOptions fields
CONFIG_OPTIONS = {
    "format": "format",
    "ignoreFuzzyString": "ignore_fuzzy_strings",
    "module": "module",
    "sort": "sort",
    "multiline": "multiline",
    "browserify": "browserify",
    "requirejs": "requirejs",
    "modulePath": "module_path",
    "defaultLanguage": "default_language",
}


def load_config(config_folder: str) -> dict[str, Any]:
    config_file_path = os.path.abspath(f"{os.path.abspath(config_folder)}/config.yml")

    config: dict[str, Any] = {}
    try:
        with open(config_file_path, "r") as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        logger.error(f"File not found: {config_file_path}")
    except yaml.YAMLError as exc:
        logger.error(sys._getframe().f_code.co_name + " " + str(exc))
        sys.exit(1)

    logging_cfg = config.get("logging", {})
    logging.basicConfig(
        level=logging.getLevelName(logging_cfg.get("level", "INFO")),
        format=logging_cfg.get("format", "%(asctime)s %(levelname)s %(message)s"),
        datefmt=logging_cfg.get("datefmt"),
    )
    return config


def build_options(config: dict[str, Any], **flags: Any) -> CompilerOptions:
    """Merge the config file's compiler section with command-line flags (flags win)."""
    values: dict[str, Any] = {}
    for key, value in (config.get("compiler") or {}).items():
        if key not in CONFIG_OPTIONS:
            logger.warning(f'Ignoring unknown compiler option "{key}"')
            continue
        values[CONFIG_OPTIONS[key]] = value
    values.update({key: value for key, value in flags.items() if value is not None})
    return CompilerOptions(**values)


@click.group()
@click.version_option()
def cli() -> None:
    pass


@cli.command("compile")
@click.argument(
    "inputs", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False)
)
@click.option("-o", "--output", help="Output file path. Defaults to stdout.")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option("--format", "format_", help="Output format (javascript or json).")
@click.option("--module", help="Angular module name for the javascript format.")
@click.option("--sort/--no-sort", default=None, help="Sort strings by msgid.")
@click.option("--multiline/--no-multiline", default=None, help="Pretty-print strings.")
@click.option(
    "--browserify/--no-browserify", default=None, help="Use require('angular')."
)
@click.option(
    "--requirejs/--no-requirejs", default=None, help="Wrap output in a define() block."
)
@click.option("--module-path", help="Module path referenced by the define() block.")
@click.option("--default-language", help="Set gettextCatalog.currentLanguage.")
@click.option(
    "--include-fuzzy", is_flag=True, default=False, help="Keep fuzzy translations."
)
def compile_(
    inputs: tuple[str, ...],
    output: str | None,
    config_folder: str,
    format_: str | None,
    module: str | None,
    sort: bool | None,
    multiline: bool | None,
    browserify: bool | None,
    requirejs: bool | None,
    module_path: str | None,
    default_language: str | None,
    include_fuzzy: bool,
) -> None:
    config = load_config(config_folder)
    options = build_options(
        config,
        format=format_,
        module=module,
        sort=sort,
        multiline=multiline,
        browserify=browserify,
        requirejs=requirejs,
        module_path=module_path,
        default_language=default_language,
        ignore_fuzzy_strings=False if include_fuzzy else None,
    )

    if not Compiler.has_format(options.format):
        logger.error(f'Unsupported format "{options.format}"')
        sys.exit(1)

    try:
        texts = []
        for path in inputs:
            encoding = polib.detect_encoding(path)
            logger.debug(f"Reading {path} as {encoding}")
            texts.append(pathlib.Path(path).read_text(encoding))
        result = Compiler(options).convert_po(texts, list(inputs))
    except CompilerError as ex:
        logger.error(f"{getattr(ex, 'filename', None) or 'input'}: {ex}")
        sys.exit(1)
    except OSError as ex:
        logger.error(f"Error parsing catalog: {ex}")
        sys.exit(1)
    except UnicodeDecodeError as ex:
        logger.error(f"Error decoding catalog: {ex}")
        sys.exit(1)

    if output:
        pathlib.Path(output).write_text(result, "utf-8")
        logger.info(f"Wrote {output}")
    else:
        click.echo(result)


@cli.command("formats")
def list_formats() -> None:
    for name in FORMATS:
        click.echo(name)
