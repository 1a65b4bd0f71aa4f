"""
Command-line interface for the card extractor.

Options left off the command line are asked for interactively.
"""

import sys
import argparse
from typing import Optional

from .logging_setup import setup_logger, log_stats
from .models import CardExtractorError
from .pdf_extract import open_source
from .pipeline import PipelineConfig, record_stats, run
from .writer import OutputFormat


EXIT_MESSAGE = "Press [enter] to exit."


def print_banner(logger):
    """Print startup banner."""
    logger.info("═" * 40)
    logger.info("  CARD EXTRACTOR v1.0")
    logger.info("  PDF Contact Cards to CSV")
    logger.info("═" * 40)
    logger.info("")


def print_sample_records(records, logger, limit=5):
    """Print sample records."""
    logger.info("")
    logger.info(f"Sample Records (first {min(limit, len(records))}):")

    for i, record in enumerate(records[:limit], 1):
        name = record.name or "N/A"
        company = record.company or "N/A"
        email = record.email or "N/A"
        logger.info(f"{i}. {name} - {company} - {email}")


def exit_program(message: Optional[str] = None, pause: bool = True) -> int:
    """
    Show a final message and wait for the user before exiting.

    Fatal errors end here too, so the exit status is always 0.
    """
    if message:
        print(message)

    print(EXIT_MESSAGE)
    if pause:
        try:
            input()
        except EOFError:
            pass

    return 0


def prompt_input_path(initial: Optional[str] = None) -> str:
    """
    Ask for the PDF path until a readable file is given.

    Raises:
        SourceReadError: if the file exists but cannot be read
    """
    path = initial

    while True:
        if path is None:
            print("What is the absolute path to the PDF file?")
            path = input().strip()

        print("Reading the file...")
        try:
            open_source(path)
            return path
        except FileNotFoundError:
            print("Invalid path, file not found in that location.")
            path = None


def prompt_output_format(initial: Optional[str] = None) -> OutputFormat:
    """Ask for the output type until csv or txt is entered."""
    value = initial

    if value is None:
        print("How would you like the output? [csv, txt]")

    while True:
        if value is None:
            value = input().strip()

        try:
            return OutputFormat(value)
        except ValueError:
            print("Unrecognized output type. Please select one of the following: csv, txt.")
            value = None


def prompt_save_path(initial: Optional[str] = None) -> str:
    if initial is not None:
        return initial
    print("Where would you like to save the output?")
    return input().strip()


def prompt_save_name(initial: Optional[str] = None) -> str:
    if initial is not None:
        return initial
    print("What name would you like to save the output with?")
    return input().strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Convert contact cards in a PDF to CSV or plain text',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--input', '-i',
        default=None,
        help='Path to the PDF file (prompted for if omitted)'
    )

    parser.add_argument(
        '--format', '-f',
        dest='output_format',
        default=None,
        help='Output format: csv or txt (prompted for if omitted)'
    )

    parser.add_argument(
        '--output-dir', '-d',
        default=None,
        help='Directory to save the output in (prompted for if omitted)'
    )

    parser.add_argument(
        '--name', '-n',
        default=None,
        help='Output file name without extension (prompted for if omitted)'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Logging level (default: INFO)'
    )

    parser.add_argument(
        '--log-dir',
        default='logs',
        help='Log file directory (default: logs)'
    )

    parser.add_argument(
        '--no-pause',
        action='store_true',
        help='Do not wait for [enter] before exiting'
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logger = setup_logger(level=args.log_level, log_dir=args.log_dir)
    pause = not args.no_pause

    print_banner(logger)

    try:
        input_path = prompt_input_path(args.input)
        output_format = prompt_output_format(args.output_format)
        config = PipelineConfig(
            input_path=input_path,
            output_format=output_format,
            output_dir=prompt_save_path(args.output_dir),
            output_name=prompt_save_name(args.name)
        )

        result = run(config)

        records = result.conversion.records
        if config.output_format is OutputFormat.CSV:
            log_stats(logger, record_stats(records), title="Record Summary")
            print_sample_records(records, logger)

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130

    except EOFError:
        logger.warning("Input closed before all answers were given")
        return 130

    except CardExtractorError as e:
        logger.error(str(e))
        return exit_program(pause=pause)

    return exit_program("Parsing Complete.", pause=pause)


if __name__ == '__main__':
    sys.exit(main())
