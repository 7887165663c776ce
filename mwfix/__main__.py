from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import ResolverConfig
from .driver import format_report, run
from .treebank import TreebankFormatError

logger = logging.getLogger(__name__)


def _str_to_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in {"true", "1", "yes", "on"}:
        return True
    if lowered in {"false", "0", "no", "off"}:
        return False
    raise argparse.ArgumentTypeError(f"Expected true/false, got '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mwfix",
        description=(
            "Resolve the placeholder tags left in a treebank after multi-word "
            "tokens were expanded into separate leaves."
        ),
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("treebank_file", nargs="?", default=None, help="Bracketed treebank file to fix")
    parser.add_argument(
        "--ner",
        action="store_true",
        help="Retain NER information in tree constituents (pre-pre-terminal nodes)",
    )
    parser.add_argument(
        "--normalize",
        type=_str_to_bool,
        default=True,
        metavar="{true,false}",
        help="Run the tree normalizer on the output of the main routine (default: true)",
    )
    parser.add_argument(
        "--suffix",
        default=".fixed",
        help="Suffix appended to the input file name for the output (default: .fixed)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    return parser


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[mwfix] %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.treebank_file:
        parser.print_help(sys.stderr)
        return 2

    config = ResolverConfig(
        retain_ner=args.ner,
        normalize=args.normalize,
        output_suffix=args.suffix,
        debug=args.debug,
    )
    _setup_logging(config.debug)

    tree_file = Path(args.treebank_file)
    try:
        report = run(tree_file, config)
    except TreebankFormatError as exc:
        logger.error("Malformed treebank '%s': %s", tree_file, exc)
        raise SystemExit(f"[mwfix] Malformed treebank '{tree_file}': {exc}") from exc
    except OSError as exc:
        logger.error("Failed to process '%s': %s", tree_file, exc)
        raise SystemExit(f"[mwfix] Failed to process '{tree_file}': {exc}") from exc

    print(format_report(report))
    print("Done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
