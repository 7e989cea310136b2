"""
Command-line interface for class template generation.

Reads a text containing a class template, fills its tokens from the
command line or a JSON token file and writes the generated code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .core import (
    ClassTemplate,
    ConfigError,
    GeneratorError,
    TemplateConfig,
    TemplateError,
    generate_code,
    load_config,
    split_lines,
    validate_config,
)
from .logging_config import get_logger, setup_logging
from .utils import TemplateLoaderError, load_text, load_tokens_file, write_text

logger = get_logger(__name__)

# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the script generator."""
    parser = argparse.ArgumentParser(
        prog="script-generator",
        description="Generate source code from a class template embedded in a text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  script-generator Constants.txt -t @FIELDS@="public const int A = 1;"
  script-generator Constants.txt --tokens tokens.json -o Assets/Scripts/
  script-generator --url https://example.com/template.txt --info
        """.strip(),
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Text file containing the template")
    input_group.add_argument("--url", help="URL to fetch the template text from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the template text from standard input"
    )

    token_group = parser.add_argument_group("tokens")
    token_group.add_argument(
        "--token",
        "-t",
        action="append",
        default=[],
        metavar="KEY=LINE",
        help="Append a line to a token value (repeatable)",
    )
    token_group.add_argument(
        "--text",
        action="append",
        default=[],
        metavar="KEY=TEXT",
        help="Append text without a line break to a token value (repeatable)",
    )
    token_group.add_argument(
        "--tokens",
        metavar="FILE",
        help="JSON file mapping token keys to a string or a list of lines",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", metavar="FILE", help="JSON configuration file")
    config_group.add_argument("--start-mark", help="Line prefix opening the template block")
    config_group.add_argument("--end-mark", help="Line prefix closing the template block")
    config_group.add_argument(
        "--extension", metavar="EXT", help="Extension of the generated file (default: .cs)"
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output",
        "-o",
        metavar="PATH",
        help="Output file, or directory receiving <ClassName><ext> (default: stdout)",
    )
    output_group.add_argument(
        "--plain",
        action="store_true",
        help="Write generated code to stdout without highlighting",
    )
    output_group.add_argument(
        "--info",
        action="store_true",
        help="Show the template class, namespace and tokens without generating",
    )
    output_group.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (default: WARNING)",
    )
    log_group.add_argument("--log-file", metavar="FILE", help="Also log to this file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the script-generator command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    logger.debug("Parsed arguments: %s", args)

    return handle_generate_command(args)


def handle_generate_command(args: argparse.Namespace) -> int:
    """
    Handle template generation from CLI arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        if not (args.file or args.url or args.stdin):
            console.print("[red]✗[/red] Input source required (file, --url, or --stdin)")
            return 1

        config = _build_config(args)
        for warning in validate_config(config):
            console.print(f"[yellow]⚠️  {warning}[/yellow]")

        source, text = _get_input_text(args)
        template = ClassTemplate(text, config)
        logger.info("Template loaded from %s", source)

        if not template.has_code:
            console.print(
                f"[red]✗ No template code found between "
                f'"{config.start_mark}" and "{config.end_mark}" in {source}[/red]'
            )
            return 1

        _apply_tokens(template, args)

        if args.info:
            _show_template_info(template, source)
            return 0

        return _generate_and_output(template, args)

    except (TemplateError, ConfigError, GeneratorError, TemplateLoaderError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.error("Generation aborted: %s", e)
        return 1
    except FileNotFoundError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except Exception as e:
        console.print(f"[red]✗ Unexpected error:[/red] {e}")
        logger.error("Unexpected error: %s", e, exc_info=True)
        return 1


def _build_config(args: argparse.Namespace) -> TemplateConfig:
    """Build configuration from CLI arguments."""
    overrides = {
        "start_mark": args.start_mark,
        "end_mark": args.end_mark,
        "file_extension": args.extension,
    }
    return load_config(custom_config=overrides, config_file=args.config)


def _get_input_text(args: argparse.Namespace) -> tuple[str, str]:
    """Get template text from the selected source."""
    if args.file:
        return load_text(file_path=args.file)
    elif args.url:
        return load_text(url=args.url)
    return "📥 stdin", sys.stdin.read()


def parse_token_argument(value: str) -> tuple[str, str]:
    """
    Split a KEY=VALUE token argument.

    Raises:
        GeneratorError: If the argument has no '=' or an empty key
    """
    key, separator, text = value.partition("=")
    if not separator or not key:
        raise GeneratorError(f"Invalid token argument '{value}', expected KEY=VALUE")
    return key, text


def _apply_tokens(template: ClassTemplate, args: argparse.Namespace):
    """Append token values from the token file and the command line."""
    if args.tokens:
        for key, value in load_tokens_file(args.tokens).items():
            if isinstance(value, list):
                for line in value:
                    template.append_line(key, line)
            else:
                template.append(key, value)

    for argument in args.token:
        template.append_line(*parse_token_argument(argument))

    for argument in args.text:
        template.append(*parse_token_argument(argument))

    logger.debug("Template tokens: %s", list(template.tokens))


def _show_template_info(template: ClassTemplate, source: str):
    """Show the derived names and token keys of a template."""
    info_text = f"""[bold]Source:[/bold] {source}
[bold]Class:[/bold] {template.class_name or '[dim]none[/dim]'}
[bold]Namespace:[/bold] {template.namespace_name or '[dim]none[/dim]'}
[bold]Lines:[/bold] {len(split_lines(template.code, template.config.newline))}"""

    console.print()
    console.print(Panel(info_text, title="🧩 Class Template", border_style="green"))

    if template.tokens:
        table = Table(title="🔑 Tokens", box=box.SIMPLE, header_style="bold cyan")
        table.add_column("Key", style="bold")
        table.add_column("In Template", style="green")
        table.add_column("Lines", justify="right")

        for key, value in template.tokens.items():
            value_lines = split_lines(value, template.config.newline)
            table.add_row(
                key,
                "yes" if key in template.code else "[yellow]no[/yellow]",
                str(len([line for line in value_lines if line])),
            )

        console.print()
        console.print(table)


def _resolve_output_path(output: str, file_name: str | None) -> Path:
    """Resolve the output argument to a file path."""
    output_path = Path(output)
    if output_path.is_dir() or output.endswith(("/", "\\")):
        if not file_name:
            raise GeneratorError(
                "Template declares no class; give an output file name instead of a directory"
            )
        return output_path / file_name
    return output_path


def _generate_and_output(template: ClassTemplate, args: argparse.Namespace) -> int:
    """Generate code and handle output with rich formatting."""
    result = generate_code(template, args.extension)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            console.print(f"[dim]Details: {result.exception}[/dim]")
        return 1

    file_name = result.metadata.get("file_name")

    if args.output:
        output_path = write_text(_resolve_output_path(args.output, file_name), result.code)
        console.print(f"[green]✓[/green] Generated code saved to [cyan]{output_path}[/cyan]")
    elif args.plain:
        sys.stdout.write(result.code)
    else:
        title = file_name or "generated code"
        top_border = "═" * 30
        console.print(f"[green]{top_border} 📄 {title} {top_border}[/green]\n")
        lexer = Syntax.guess_lexer(file_name or "", code=result.code)
        console.print(Syntax(result.code, lexer, theme="monokai"))
        console.print(f"\n[green]{top_border}{top_border}[/green]")

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
