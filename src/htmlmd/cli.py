"""Command-line interface for htmlmd."""

import argparse
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .conversion import HtmlToMarkdown
from .conversion.protocols import MarkdownConverter
from .logging_config import setup_logging
from .models.config import ConverterConfig
from .models.result import ConversionResult
from .source import decode_html, read_html, write_markdown

STDIO = "-"
STDIN_STEM = "stdin"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="htmlmd",
        description="Convert HTML documents to Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a file, writing page.md next to it
  htmlmd page.html

  # Choose the output file
  htmlmd page.html -o README.md

  # Convert several files into a directory
  htmlmd a.html b.html -o converted/

  # Read from stdin, write to stdout
  cat page.html | htmlmd -

  # Use a YAML configuration file
  htmlmd page.html --config htmlmd.yaml
        """,
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help="HTML files to convert ('-' reads stdin)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Output
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file, or directory when converting several inputs (default: INPUT with .md suffix)",
    )
    output_group.add_argument(
        "--stdout",
        action="store_true",
        help="Print Markdown to stdout instead of writing files",
    )
    output_group.add_argument(
        "--encoding",
        type=str,
        default=None,
        help="Input encoding (default: detect from BOM or charset, else utf-8)",
    )

    # Conversion settings
    convert_group = parser.add_argument_group("conversion settings")
    convert_group.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="FILE",
        help="YAML configuration file",
    )
    convert_group.add_argument(
        "--strict",
        action="store_true",
        help="Treat elements left open at end of input as an error",
    )
    convert_group.add_argument(
        "--tidy",
        action="store_true",
        help="Collapse blank lines and trailing whitespace in the output",
    )
    convert_group.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective configuration as YAML and exit",
    )

    # Logging
    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-file",
        type=str,
        default=None,
        metavar="FILE",
        help="Also write log messages to FILE",
    )
    log_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    log_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress output",
    )

    return parser


def load_config(args: argparse.Namespace) -> ConverterConfig:
    """Build the configuration from the optional YAML file and CLI flags."""
    config = ConverterConfig.from_yaml_file(args.config) if args.config else ConverterConfig()

    overrides: dict = {}
    if args.strict:
        overrides["strict"] = True
    if args.tidy:
        overrides["tidy_output"] = True
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    elif args.quiet:
        overrides["log_level"] = "ERROR"

    if not overrides:
        return config
    return ConverterConfig.model_validate({**config.model_dump(), **overrides})


def resolve_output(source: str, args: argparse.Namespace) -> Optional[Path]:
    """Return the file to write for an input, or None for stdout."""
    if args.stdout or (source == STDIO and args.output is None):
        return None
    if args.output is not None:
        if len(args.inputs) > 1:
            stem = STDIN_STEM if source == STDIO else Path(source).stem
            return args.output / (stem + ".md")
        return args.output
    return Path(source).with_suffix(".md")


def process_input(
    source: str, converter: MarkdownConverter, args: argparse.Namespace
) -> tuple[Optional[Path], ConversionResult]:
    """
    Read, convert and write one input.

    Returns:
        Tuple of (file written or None for stdout, conversion result)

    Raises:
        OSError: If the input cannot be read or the output cannot be written
    """
    if source == STDIO:
        html = decode_html(sys.stdin.buffer.read(), args.encoding)
    else:
        html = read_html(source, args.encoding)

    destination = resolve_output(source, args)
    if destination is not None and source != STDIO and destination.resolve() == Path(source).resolve():
        raise FileExistsError("refusing to overwrite the input file")

    result = converter.convert_with_result(html)
    if destination is None:
        sys.stdout.write(result.markdown)
    else:
        write_markdown(destination, result.markdown)
    return destination, result


def run_converter(args: argparse.Namespace) -> int:
    """Run the conversion with given arguments."""
    console = Console(stderr=True)

    try:
        config = load_config(args)
    except (OSError, ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    setup_logging(config.log_level, log_file=args.log_file, force=True)

    if args.show_config:
        sys.stdout.write(config.to_yaml())
        return 0

    if not args.inputs:
        console.print("[red]Error:[/red] Please provide at least one input file")
        return 1

    if args.inputs.count(STDIO) > 1:
        console.print("[red]Error:[/red] stdin can only be read once")
        return 1

    converter = HtmlToMarkdown(config)
    converted = passed_through = failed = 0

    for source in args.inputs:
        try:
            destination, result = process_input(source, converter, args)
        except OSError as e:
            console.print(f"[red]Failed:[/red] {escape(source)} - {escape(str(e))}")
            failed += 1
            continue

        if result.converted:
            converted += 1
            if not args.quiet and destination is not None:
                console.print(f"[green]Converted[/green] {escape(source)} -> {escape(str(destination))}")
        else:
            passed_through += 1
            if not args.quiet:
                console.print(f"[yellow]Copied unchanged[/yellow] {escape(source)} ({escape(result.fallback_reason)})")

    if not args.quiet and len(args.inputs) > 1:
        console.print()
        console.print("[bold]Results:[/bold]")
        console.print(f"  Converted: {converted}")
        console.print(f"  Copied unchanged: {passed_through}")
        console.print(f"  Failed: {failed}")

    return 0 if failed == 0 else 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_converter(args)


if __name__ == "__main__":
    sys.exit(main())
