"""
replacetmpl Plugin Main Module.

This module serves as the main entry point for the replacetmpl plugin, a ChRIS
plugin that fills `@package.key@` placeholders in template files.

Features:
- Loads one or more JSON replacement sources (first-listed wins)
- Substitutes tokens in every template below the input directory
- Writes results to the output directory with the `.tmpl` suffix stripped
- Reports unknown or malformed tokens with file, line and context

Usage:
    Run this module as a standalone script or through the `replacetmpl`
    console script.

Examples:
    Fill templates with package metadata:
        $ replacetmpl --replacements package.json in/ out/

    Layer local overrides over defaults:
        $ replacetmpl --replacements local.json --replacements defaults.json in/ out/

    Custom prefix, or no prefix at all:
        $ replacetmpl --replacements app.json --prefix app in/ out/
        $ replacetmpl --replacements app.json --unprefixed in/ out/

Note:
    Problems with individual tokens never fail the run; configuration
    problems (no replacements, invalid prefix, unreadable source) exit with 1.
"""

from pathlib import Path
from argparse import Namespace, ArgumentParser, ArgumentDefaultsHelpFormatter
from chris_plugin import chris_plugin
from rich.console import Console
from rich.markup import escape
from replacetmpl.config.settings import appsettings
from replacetmpl.lib.engine import TemplateTransform, transform_create
from replacetmpl.lib.errors import MissingReplacements, ReplaceTmplError
from replacetmpl.lib.sources import sources_load
from replacetmpl.lib.log import LOG
from replacetmpl.models.dataModel import EngineOptions
import sys
from typing import Final

__version__: Final[str] = "0.1.0"

TEMPLATE_ENCODING: Final[str] = "utf-8"

console: Final[Console] = Console()

# Define the argument parser for the plugin
parser: Final[ArgumentParser] = ArgumentParser(
    description="A ChRIS plugin that replaces @package.key@ placeholders in templates.",
    formatter_class=ArgumentDefaultsHelpFormatter,
)
parser.add_argument(
    "--replacements",
    type=Path,
    action="append",
    help="JSON file of replacements; repeatable, first-listed wins",
)
parser.add_argument(
    "--prefix", type=str, default=None, help="Key prefix (default: package)"
)
parser.add_argument(
    "--unprefixed",
    action="store_true",
    help="Match @key@ tokens; overrides --prefix",
)
parser.add_argument(
    "--pattern",
    type=str,
    default=appsettings.templateGlob,
    help="Glob selecting template files below the input directory",
)
parser.add_argument(
    "--debug", action="store_true", help="Print prefix and merged replacements"
)
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)


def transform_setup(options: Namespace) -> TemplateTransform:
    """Load replacement sources and configure the engine.

    Args:
        options: Parsed command-line arguments

    Returns:
        TemplateTransform ready for use on every template

    Raises:
        ReplaceTmplError: On missing replacements, invalid prefix or
            unreadable replacement sources
    """
    if not options.replacements:
        raise MissingReplacements()

    return transform_create(
        sources_load(options.replacements),
        EngineOptions(
            prefix=options.prefix,
            unprefixed=options.unprefixed,
            debug=options.debug or appsettings.debug_mode,
        ),
        console=console,
        context_characters=appsettings.contextCharacters,
    )


def outputPath_resolve(input_file: Path, inputdir: Path, outputdir: Path) -> Path:
    """Map a template to its output location, dropping the template suffix."""
    output_file: Path = outputdir / input_file.relative_to(inputdir)
    if output_file.suffix == appsettings.templateSuffix:
        output_file = output_file.with_suffix("")
    return output_file


def files_transform(
    transform: TemplateTransform, inputdir: Path, outputdir: Path, pattern: str
) -> int:
    """Apply the transform to every template below `inputdir`.

    Args:
        transform: Configured engine transform
        inputdir: Directory containing templates
        outputdir: Directory receiving the filled files
        pattern: Glob selecting templates, relative to `inputdir`

    Returns:
        Number of files written

    Note:
        Line endings are kept as they are. A template that is not valid
        UTF-8 is reported and skipped; the remaining templates are still
        processed.
    """
    count: int = 0
    for input_file in sorted(inputdir.glob(pattern)):
        if not input_file.is_file():
            continue
        relative: str = input_file.relative_to(inputdir).as_posix()
        output_file: Path = outputPath_resolve(input_file, inputdir, outputdir)

        try:
            with open(input_file, "r", encoding=TEMPLATE_ENCODING, newline="") as f:
                text: str = f.read()
        except UnicodeDecodeError as e:
            LOG(f"Skipping {relative}: {e}")
            console.print(
                f"[bold red]Skipped {escape(relative)}:[/bold red] "
                f"not valid {TEMPLATE_ENCODING} ({escape(e.reason)} "
                f"at byte {e.start})"
            )
            continue

        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding=TEMPLATE_ENCODING, newline="") as f:
            f.write(transform(text, relative))
        LOG(f"{relative} -> {output_file}")
        count += 1
    return count


def plugin_run(options: Namespace, inputdir: Path, outputdir: Path) -> int:
    """Configure the engine and fill every template.

    Args:
        options: Parsed command-line options
        inputdir: Directory containing template files
        outputdir: Directory for filled files

    Returns:
        Number of files written

    Raises:
        SystemExit: With code 1 on configuration or source errors
    """
    try:
        transform: TemplateTransform = transform_setup(options)
    except ReplaceTmplError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    count: int = files_transform(transform, inputdir, outputdir, options.pattern)
    if not count:
        console.print(
            f"[bold yellow]No files matching {escape(options.pattern)} "
            f"in {escape(str(inputdir))}[/bold yellow]"
        )
    return count


@chris_plugin(
    parser=parser,
    title="pl-replacetmpl",
    category="",
    min_memory_limit="100Mi",
    min_cpu_limit="1000m",
    min_gpu_limit=0,
)
def main(options: Namespace, inputdir: Path, outputdir: Path) -> None:
    """Main entry point for the ChRIS plugin.

    Args:
        options: Parsed command-line options
        inputdir: Directory containing template files
        outputdir: Directory for filled files
    """
    plugin_run(options, inputdir, outputdir)
