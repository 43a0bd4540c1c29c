from __future__ import annotations

import argparse
from textwrap import indent

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import __version__
from .config import CliConfig
from .output import write_boilerplate
from .parsing import build_request
from .templates import UnsupportedLanguageError, parse_language, supported_languages

CONSOLE = Console()
ERR_CONSOLE = Console(stderr=True)

# --- UI Components ---

def _print_block(title: str, content: str, max_lines: int = 20) -> None:
    content = content.strip()
    lines = content.splitlines()
    if len(lines) > max_lines:
        content = "\n".join(lines[:max_lines]) + f"\n... (truncated, {len(lines) - max_lines} more lines)"
    CONSOLE.print(Panel.fit(Text(indent(content, "  ")), title=Text(title), border_style="cyan"))

def _print_error(message: str) -> None:
    ERR_CONSOLE.print(message, style="bold red", markup=False, highlight=False, soft_wrap=True)

def _confirm(message: str, default: bool = True) -> bool:
    suffix = "[Y/n]" if default else "[y/N]"
    resp = input(f"{message} {suffix} ").strip().lower()
    if not resp:
        return default
    return resp in ("y", "yes")

def _unsupported_language_message() -> str:
    return "Supported languages are: " + ", ".join(supported_languages())

# --- Main Application Logic ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="code-cli", description="Generate boilerplate code for coding challenges")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-n", "--name", required=True, metavar="functionName", help="Function name")
    parser.add_argument("-l", "--language", required=True, help="Programming language (python/javascript)")
    parser.add_argument("-i", "--inputs", required=True, help="Comma-separated function inputs")
    parser.add_argument("-y", "--yes", action="store_true", help="Skip the confirmation prompt.")
    parser.add_argument("-o", "--output-dir", help="Directory to write the file to (defaults to the current directory).")
    return parser

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = CliConfig.from_args(args)

    try:
        parse_language(args.language)
    except UnsupportedLanguageError:
        _print_error(_unsupported_language_message())
        return 1

    if not config.assume_yes and not _confirm(f'Generate boilerplate code for function "{args.name}" in {args.language}?'):
        print("Operation cancelled.")
        return 0

    try:
        request = build_request(args.name, args.language, args.inputs)
    except UnsupportedLanguageError as e:
        _print_error(f"{e}\n{_unsupported_language_message()}")
        return 1
    except ValueError as e:
        _print_error(str(e))
        return 1

    # Write errors propagate and end the process with a traceback.
    path = write_boilerplate(request, config.output_dir)
    _print_block(path.name, path.read_text(encoding="utf-8"))
    CONSOLE.print(f"Boilerplate saved to: {path}", markup=False, highlight=False, soft_wrap=True)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
