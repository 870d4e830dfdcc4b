#!/usr/bin/env python3
"""Entry point for generating inner/outer graphs.

Chains the generation phases into a single command: outer graph ->
inner graphs -> linking -> rendering.

Usage:
    python run_generation.py generate -o chain/3 -i tree/7 -l first
    python run_generation.py generate --config config.json --format graphml
    python run_generation.py generators
"""

import argparse
import dataclasses
import logging
import sys
import time
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

from dacite import DaciteError

from g2io.config import (
    DEFAULT_CONFIG,
    GenerationConfig,
    config_from_json,
    full_config_hash,
    graph_config_hash,
)
from g2io.display import RENDERERS
from g2io.errors import G2ioError, OrientationMismatch
from g2io.generators import GENERATORS
from g2io.graph.types import Orientation
from g2io.linkers import LINKERS
from g2io.pipeline import GenerationStep, generate_inner_outer

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Iterator[None]:
    """Context manager that logs a stage with its elapsed time."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    log.info("Completed: %s in %.3fs", name, time.monotonic() - t0)


def format_listing(entries: Iterable[tuple[str, tuple[str, ...]]]) -> str:
    """Format ``(name, description)`` pairs as an aligned listing.

    Names are padded to the longest name plus four spaces; extra
    description lines are indented to the same column and every entry is
    followed by a blank line.
    """
    entries = list(entries)
    width = max((len(name) for name, _ in entries), default=0) + 4
    lines = []
    for name, description in entries:
        first = description[0] if description else ""
        lines.append(f"{name:{width}}{first}".rstrip())
        lines.extend(f"{'':{width}}{line}" for line in description[1:])
        lines.append("")
    return "\n".join(lines) + ("\n" if lines else "")


def load_config(args: argparse.Namespace) -> GenerationConfig:
    """Build the run configuration: defaults, then JSON file, then options."""
    config = DEFAULT_CONFIG
    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            raise FileNotFoundError(f"config file not found: {config_path}")
        config = config_from_json(config_path.read_text())
        log.info("Config loaded from %s", config_path)

    overrides = {
        "outer": args.outer,
        "inner": args.inner,
        "linker": args.linker,
        "seed": args.seed,
        "n_workers": args.workers,
        "output_format": args.format,
    }
    if args.orientation is not None:
        overrides["orientation"] = args.orientation
    return dataclasses.replace(
        config, **{k: v for k, v in overrides.items() if v is not None}
    )


def run_generate(args: argparse.Namespace) -> None:
    config = load_config(args)
    log.info(
        "Outer %s, inner %s, linker %s (%s)",
        config.outer, config.inner, config.linker, config.orientation,
    )
    log.info("Config hash: %s, graph hash: %s",
             full_config_hash(config), graph_config_hash(config))

    # fail on a bad format before generating anything
    renderer = RENDERERS.resolve(config.output_format)
    if not renderer.supports(config.orientation):
        raise OrientationMismatch(
            f"output format {config.output_format!r} does not support "
            f"{config.orientation} graphs"
        )

    def announce(step: GenerationStep) -> None:
        log.info("Phase: %s", step.name.lower().replace("_", " "))

    with stage_timer("Generation"):
        result = generate_inner_outer(config, listeners=[announce])

    with stage_timer("Rendering"):
        if args.output is None:
            renderer.render(result.graph, sys.stdout)
        else:
            output_path = Path(args.output)
            with output_path.open("w", encoding="utf-8") as stream:
                renderer.render(result.graph, stream)
            log.info("Graph written to %s", output_path)


def _add_logging_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    group.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate graphs made of inner graphs linked along an outer graph"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a graph")
    generate.add_argument("-o", "--outer", help="the kind of outer graph, e.g. chain/3")
    generate.add_argument("-i", "--inner", help="the kind of inner graphs, e.g. tree/7")
    generate.add_argument("-l", "--linker", help="the linker used to connect inner graphs")
    orientation = generate.add_mutually_exclusive_group()
    orientation.add_argument(
        "--directed",
        dest="orientation",
        action="store_const",
        const=Orientation.DIRECTED,
        help="Generate a directed graph (the default)",
    )
    orientation.add_argument(
        "--undirected",
        dest="orientation",
        action="store_const",
        const=Orientation.UNDIRECTED,
        help="Generate an undirected graph",
    )
    generate.add_argument("--seed", type=int, help="Master seed (random if omitted)")
    generate.add_argument("--workers", type=int, help="Number of worker threads")
    generate.add_argument("--format", help="Output format (see 'formats')")
    generate.add_argument("--output", help="Output file (stdout if omitted)")
    generate.add_argument(
        "--config",
        help="Path to a generation config JSON file; options override it",
    )
    _add_logging_args(generate)

    listings = [
        ("generators", "List the available graph generators", GENERATORS),
        ("linkers", "List the available linkers", LINKERS),
        ("formats", "List the available output formats", RENDERERS),
    ]
    for name, help_text, registry in listings:
        listing = subparsers.add_parser(name, help=help_text)
        listing.set_defaults(registry=registry)
        _add_logging_args(listing)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command != "generate":
        sys.stdout.write(format_listing(args.registry.list()))
        return

    try:
        run_generate(args)
    except (G2ioError, DaciteError, ValueError, OSError):
        log.exception("Generation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
