# 19.10.26

import sys
import logging
import argparse
from typing import List, Optional


# External library
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table


# Internal utilities
from M3UJson.utils import config_manager, start_message, Logger
from M3UJson.core.parser import PlaylistExtractor
from M3UJson.source.loader import load_playlist, PlaylistLoadError
from M3UJson.source.writer import write_streams, STDOUT
from M3UJson.source.utils.object import ExtractionResult
from M3UJson.version import __title__, __version__


# Config
console = Console(stderr=True)
msg = Prompt(console=console)


def setup_argument_parser() -> argparse.ArgumentParser:
    """Setup and return configured argument parser."""
    parser = argparse.ArgumentParser(
        prog='m3u-json',
        description='Extract DASH urls and ClearKey pairs from an M3U playlist into JSON.',
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument('source', nargs='?', default=None, help='Playlist path or http(s) URL (asked interactively when omitted)')
    parser.add_argument('-o', '--output', type=str, help=f"Output JSON file, '{STDOUT}' for stdout (default from config: OUTPUT.path)")
    parser.add_argument('--indent', type=int, help='JSON indentation (default from config: OUTPUT.indent)')
    parser.add_argument('--workers', type=int, help='Threads used to process playlist blocks')
    parser.add_argument('--user-agent', dest='user_agent', type=str, help='Fallback user agent for channels without #EXTVLCOPT:http-user-agent')
    parser.add_argument('--quiet', action='store_true', help='Only show warnings, hide per-channel trace')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'{__title__} {__version__}')
    return parser


def apply_config_updates(args: argparse.Namespace) -> None:
    """Apply command line arguments to configuration."""
    arg_mappings = {
        'output': ('OUTPUT', 'path'),
        'indent': ('OUTPUT', 'indent'),
        'workers': ('EXTRACT', 'max_workers'),
        'user_agent': ('EXTRACT', 'default_user_agent'),
    }

    for arg_name, (section, key) in arg_mappings.items():
        value = getattr(args, arg_name, None)
        if value is not None:
            config_manager.config.set(section, key, value)

    if args.quiet:
        config_manager.config.set('DEFAULT', 'show_trace', False)
    if args.debug:
        config_manager.config.set('DEFAULT', 'debug', True)


def ask_source() -> str:
    return msg.ask("[green]Enter the M3U file path or URL (a bare file name is looked up in the current directory)").strip()


def report_diagnostics(result: ExtractionResult, show_trace: bool = False) -> None:
    """Print warnings, and informational events when show_trace is set."""
    for event in result.diagnostics:
        if event.is_warning:
            logging.warning(str(event))

            raw_block = event.context.get('block')
            if raw_block and show_trace:
                console.print(raw_block.strip(), markup=False, style="dim")

        elif show_trace:
            console.print(str(event), markup=False, style="cyan")


def display_summary(result: ExtractionResult) -> None:
    table = Table(title=f"{len(result.streams)} channel(s) from {result.blocks} block(s)")
    table.add_column("tvg-id", style="cyan")
    table.add_column("url", style="green", overflow="fold")
    table.add_column("keys", justify="right")
    table.add_column("user agent", style="dim", overflow="fold")

    for identifier, record in result.streams.items():
        table.add_row(identifier, record.url, str(len(record.keys)), record.user_agent)

    console.print(table)


def run(source: str) -> ExtractionResult:
    """Load, extract and write; errors from loading or writing propagate."""
    content = load_playlist(source)

    extractor = PlaylistExtractor(
        default_user_agent=config_manager.config.get('EXTRACT', 'default_user_agent'),
        max_workers=config_manager.config.get_int('EXTRACT', 'max_workers', default=1)
    )
    result = extractor.extract(content)
    report_diagnostics(result, config_manager.config.get_bool('DEFAULT', 'show_trace'))

    destination = write_streams(result.streams, config_manager.config.get('OUTPUT', 'path'))
    if destination != STDOUT:
        display_summary(result)
        console.print(f"[green]Conversion complete, result saved in {destination}")

    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = setup_argument_parser()
    args = parser.parse_args(argv)
    apply_config_updates(args)

    Logger(debug=config_manager.config.get_bool('DEFAULT', 'debug'))
    start_message()

    source = args.source or ask_source()

    try:
        run(source)

    except PlaylistLoadError as e:
        logging.error(str(e))
        console.print(f"[red]Error: {e}")
        return 1

    except OSError as e:
        logging.error(f"Cannot write output: {e}")
        console.print(f"[red]Cannot write output: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
