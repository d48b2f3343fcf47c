#!/usr/bin/env python3
"""List the step definitions, transformations and hooks a context declares.

Usage:
    python -m context_loader myproject.contexts:FeatureContext --format yaml
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional, Sequence

import yaml

from .annotations import Annotation
from .dispatchers import DefinitionDispatcher, HookDispatcher
from .exceptions import ContextImportError
from .importer import import_context
from .loader import AnnotatedLoader

logger = logging.getLogger(__name__)

FORMATS = ("text", "json", "yaml")
LOG_LEVEL_ENV = "CONTEXT_LOADER_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def format_text(annotations: Sequence[Annotation]) -> str:
    lines = []
    for annotation in annotations:
        line = f"{annotation.kind.value} {annotation.callback}"
        if annotation.argument is not None:
            line += f" {annotation.argument}"
        if annotation.description is not None:
            line += f"  # {annotation.description}"
        lines.append(line)
    return "\n".join(lines)


def format_annotations(annotations: Sequence[Annotation], output_format: str) -> str:
    records = [annotation.to_dict() for annotation in annotations]
    if output_format == "json":
        return json.dumps(records, indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(records, sort_keys=False, allow_unicode=True).rstrip("\n")
    return format_text(annotations)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="context_loader",
        description="List the annotations declared in context class docstrings.",
    )
    parser.add_argument(
        "targets",
        nargs="+",
        metavar="TARGET",
        help="Context class as package.module:ClassName",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # Defaults from the environment bypass the choices check.
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"invalid {LOG_LEVEL_ENV} value {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})"
        )

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    # Local context modules resolve from the working directory, as with
    # `python -m`.
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    definitions = DefinitionDispatcher()
    hooks = HookDispatcher()
    loader = AnnotatedLoader(definitions, hooks)

    for target in args.targets:
        try:
            context = import_context(target)
        except ContextImportError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        logger.info("Loading %s", target)
        loader.load(context)

    annotations = (
        definitions.get_definitions()
        + definitions.get_transformations()
        + hooks.get_hooks()
    )
    output = format_annotations(annotations, args.format)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
