#!/usr/bin/env python3
"""
Command line entry point.

Examples:
    vncorenlp --fin sample_input.txt --fout output.txt
    vncorenlp -f column -a wseg,pos,ner --fin sample_input.txt --fout output.txt
    vncorenlp --din sample_input/ --dout output/
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from vncorenlp.batch import default_output_file, process_directory, process_file
from vncorenlp.config import DEFAULT_ANNOTATORS, DEFAULT_FORMAT, DEFAULT_SPACY_MODEL, PipelineConfig
from vncorenlp.exceptions import InvalidConfiguration
from vncorenlp.pipeline import VnCoreNLPPipeline

logger = logging.getLogger("vncorenlp")

EXAMPLES = """Example:
With file:
  vncorenlp --fin sample_input.txt --fout output.txt
  vncorenlp -f column --fin sample_input.txt --fout output.txt
  vncorenlp -f column -a wseg,pos,ner --fin sample_input.txt --fout output.txt
With directory:
  vncorenlp --din sample_input/ --dout output/
  vncorenlp -f column --din sample_input/ --dout output/
  vncorenlp -f column -a wseg,pos,ner --din sample_input/ --dout output/
"""


class ArgumentParser(argparse.ArgumentParser):
    """Prints full usage to stdout and exits with status 1 on bad arguments."""

    def error(self, message):
        print(f"{self.prog}: error: {message}")
        print_usage(self)
        self.exit(1)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="vncorenlp",
        description="Vietnamese annotation pipeline: word segmentation, POS tagging, NER, dependency parsing",
        add_help=False,
    )
    parser.add_argument('-h', '--help', action='store_true', help="Show help information")
    parser.add_argument('--fin', metavar='FILE', help="Path to input file")
    parser.add_argument('--fout', metavar='FILE', help="Path to output file (optional, default: fin-name.out)")
    parser.add_argument('--din', metavar='DIR', help="Path to input directory")
    parser.add_argument('--dout', metavar='DIR', help="Path to output directory (optional, default: din/*.out)")
    parser.add_argument(
        '-f', '--format',
        default=DEFAULT_FORMAT,
        help=f"Output format: column or inline (optional, default: {DEFAULT_FORMAT})"
    )
    parser.add_argument(
        '-a', '--annotators',
        default=",".join(DEFAULT_ANNOTATORS),
        help=f'The annotators to run over a given sentence (optional, default: "{",".join(DEFAULT_ANNOTATORS)}")'
    )
    parser.add_argument(
        '--model',
        default=DEFAULT_SPACY_MODEL,
        help=f"spaCy model for pos/ner/parse (optional, default: {DEFAULT_SPACY_MODEL})"
    )
    parser.add_argument(
        '--lexicon',
        type=Path,
        help="Word segmentation lexicon, one word per line (optional, default: bundled lexicon)"
    )
    return parser


def print_usage(parser: argparse.ArgumentParser) -> None:
    parser.print_help(file=sys.stdout)
    print()
    print(EXAMPLES)


def check_inputs(args) -> None:
    """Exactly one of --fin / --din must be given."""
    if args.fin is None and args.din is None:
        raise InvalidConfiguration("Missing input!")
    if args.fin is not None and args.din is not None:
        raise InvalidConfiguration("Many inputs!")


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()

    if not argv:
        print_usage(parser)
        return 0

    args = parser.parse_args(argv)
    if args.help:
        print_usage(parser)
        return 0

    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    try:
        config = PipelineConfig(
            annotators=args.annotators,
            output_format=args.format,
            spacy_model=args.model,
            lexicon_path=args.lexicon,
        )
        check_inputs(args)
    except InvalidConfiguration as e:
        print(str(e))
        print_usage(parser)
        return 1

    try:
        with VnCoreNLPPipeline(config) as pipeline:
            if args.fin is not None:
                fout = args.fout or default_output_file(args.fin)
                process_file(pipeline, args.fin, fout)
            else:
                report = process_directory(pipeline, args.din, args.dout or args.din)
                if not report.ok:
                    for failure in report.failed:
                        logger.error(f"✗ {failure.path}: {failure.error}")
                    return 1
    except Exception as e:
        logger.error(f"✗ {e}", exc_info=True)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
