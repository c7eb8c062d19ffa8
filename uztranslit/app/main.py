#!/usr/bin/env python3

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pydantic
import toml

from .encoding import CharsetManager
from .exceptions import DecodingError, TranslitException
from .i18n import Direction, Transliterator
from .utils.config import Config, LoggingConfig, load_config
from .utils.logger import setup_logging

DIRECTION_CHOICES = ["l2c", "c2l", "latin-to-cyrillic", "cyrillic-to-latin"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uztranslit",
        description="Transliterate Uzbek text between Latin and Cyrillic scripts",
    )
    parser.add_argument("files", nargs="*", help="Input files ('-' or none for stdin)")
    parser.add_argument("-d", "--direction", choices=DIRECTION_CHOICES,
                        help="Conversion direction (detected per input when omitted)")
    parser.add_argument("-c", "--config", help="Path to TOML config file")
    parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    parser.add_argument("--no-shield", action="store_true",
                        help="Transliterate inside <...> markup too")
    parser.add_argument("--input-encoding", help="Input encoding (detected when omitted)")
    parser.add_argument("--output-encoding", help="Output encoding (config default when omitted)")
    parser.add_argument("--list-encodings", action="store_true",
                        help="Show supported encodings and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def read_input(name: str) -> bytes:
    if name == "-":
        return sys.stdin.buffer.read()
    return Path(name).read_bytes()


def write_output(data: bytes, output: Optional[str]) -> None:
    if output:
        Path(output).write_bytes(data)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()


def run(args: argparse.Namespace, config: Config, logger: logging.Logger) -> int:
    charsets = CharsetManager.from_config(config)

    if args.list_encodings:
        for display, encoding in charsets.get_encoding_menu():
            print(f"{encoding:<14} {display}")
        return 0

    transliterator = Transliterator.from_config(config)
    if args.no_shield:
        transliterator.shield_markup = False
    direction = Direction.parse(args.direction) if args.direction else None

    results = []
    for name in args.files or ["-"]:
        data = read_input(name)
        text, encoding = charsets.decode(data, args.input_encoding)
        logger.info(f"Read {len(data)} bytes from {name} as {encoding}")
        results.append(transliterator.transliterate(text, direction))

    write_output(charsets.encode("".join(results), args.output_encoding), args.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config and not Path(args.config).exists():
        parser.error(f"config file not found: {args.config}")

    level = "DEBUG" if args.verbose else None

    try:
        config = load_config(args.config)
    except (TranslitException, toml.TomlDecodeError, pydantic.ValidationError) as e:
        logger = setup_logging(level=level, log_config=LoggingConfig())
        logger.error(f"Invalid configuration: {e}")
        return 1

    logger = setup_logging(level=level, log_config=config.logging)

    try:
        return run(args, config, logger)
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    except DecodingError as e:
        logger.error(f"Decoding failed: {e}")
        return 1
    except TranslitException as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
