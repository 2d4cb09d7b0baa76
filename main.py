import argparse
import logging
import os
import sys

from rich.console import Console
from rich.errors import StyleSyntaxError

from config import BATCH_SIZE, HIGHLIGHT_STYLE, NO_COLOR, VERSION, WORKERS
from search.errors import OutputWriteError, SearchError
from search.highlighter import DEFAULT_STYLE, PLAIN_MARKERS, Markers
from search.models import EngineConfig
from search.search_engine import SearchEngine
from utils.log_file import show_log_file
from utils.logger import setup_logger
from utils.output_sink import OutputSink

SUBCOMMANDS = ("examples", "log")

EXAMPLES = [
    ("Highlight every match, keep all lines", "ps aux | sp 'python[0-9.]*'"),
    ("Only print matching lines", "cat /var/log/syslog | sp -f 'error|warn'"),
    ("Process a large input in parallel (output order may change)", "cat big.log | sp -p -f '\\d{4}-\\d{2}-\\d{2}'"),
    ("Inline flags work as in Python regular expressions", "ls | sp '(?i)readme'"),
]


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sp",
        description="Search in stdin",
        epilog="Subcommands: 'sp examples' shows examples, 'sp log' shows the log file.",
    )
    parser.add_argument("pattern", nargs="?", help="Regular expression to search for")
    parser.add_argument("-f", "--filter", action="store_true", help="Only print lines that match, without highlighting")
    parser.add_argument("-p", "--parallel", action="store_true", help="Process input in parallel if possible. The input order will most likely change")
    parser.add_argument("-w", "--workers", type=positive_int, default=WORKERS, help="Worker threads for --parallel (default: CPU count)")
    parser.add_argument("--batch-size", type=positive_int, default=BATCH_SIZE, help="Lines per parallel batch")
    parser.add_argument("--no-color", action="store_true", help="Mark matches with << >> instead of colors")
    parser.add_argument("--examples", action="store_true", help="Show examples")
    parser.add_argument("-L", "--log", action="store_true", help="Show content of the log file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def resolve_markers(no_color, style=HIGHLIGHT_STYLE):
    if no_color or NO_COLOR:
        return PLAIN_MARKERS
    try:
        return Markers.from_style(style)
    except StyleSyntaxError as e:
        logging.getLogger(__name__).warning(f"Invalid highlight style {style!r} ({e}), using default.")
        return Markers.from_style(DEFAULT_STYLE)


def print_examples(console):
    for i, (title, command) in enumerate(EXAMPLES, start=1):
        console.print(f"\n[bold]Example {i}[/bold]\n----------")
        console.print(title)
        console.print(f"  $ {command}", markup=False, highlight=False)


def _silence_stdout(stream):
    # Redirect the closed pipe to devnull so the final flush at exit doesn't raise
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, stream.fileno())
    except (OSError, ValueError):
        pass


def main(argv=None, stdin=None, stdout=None):
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    argv = sys.argv[1:] if argv is None else list(argv)

    parser = build_parser()
    subcommand = argv[0] if argv and argv[0] in SUBCOMMANDS else None
    args = parser.parse_args(argv[1:] if subcommand else argv)

    logger = setup_logger()
    console = Console(file=stdout)

    if subcommand == "log" or args.log:
        try:
            console.print(show_log_file(), soft_wrap=True)
        except OSError as e:
            logger.error(f"Unable to read logs: {e}")
            return 1
        return 0

    if subcommand == "examples" or args.examples:
        print_examples(console)
        return 0

    if args.pattern is None:
        parser.print_help(file=stdout)
        return 0

    try:
        config = EngineConfig(
            pattern=args.pattern,
            filter_mode=args.filter,
            parallel_mode=args.parallel,
            workers=args.workers,
            batch_size=args.batch_size,
        )
        sink = OutputSink(stdout)
        engine = SearchEngine(config, sink, markers=resolve_markers(args.no_color))
        engine.run(stdin)
    except KeyboardInterrupt:
        console.print("[italic]Received Ctrl-C![/italic]")
        return 0
    except OutputWriteError as e:
        logger.error(str(e))
        if isinstance(e.original_error, BrokenPipeError) and stdout is sys.stdout:
            _silence_stdout(stdout)
        return 1
    except SearchError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
