"""Command line entry point: build a roster and run one dispatch pass."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from skirmish import env
from skirmish.engine.capabilities import default_registry, extended_registry
from skirmish.engine.dispatcher import FALLBACK_SILENT, Dispatcher
from skirmish.errors import UnknownVariantError
from skirmish.game.roster import DEFAULT_ROSTER, build_roster, parse_roster
from skirmish.ui.feedback import ConsoleSink, FeedbackBus
from skirmish.ui.logsink import LogSink

LOG = logging.getLogger(__name__)


def _roster_arg(raw: str) -> List[str]:
    try:
        keys = parse_roster(raw)
    except UnknownVariantError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    if not keys:
        raise argparse.ArgumentTypeError("roster must name at least one variant")
    return keys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skirmish",
        description="Move every entity, let capable ones fly or shoot, then stage a short fight.",
    )
    parser.add_argument(
        "--roster",
        type=_roster_arg,
        default=",".join(DEFAULT_ROSTER),
        help="comma separated variants in processing order (default: %(default)s)",
    )
    parser.add_argument(
        "--with-shoot",
        action="store_true",
        help="also dispatch the shoot capability",
    )
    parser.add_argument(
        "--silent",
        action="store_true",
        help="skip entities lacking a capability instead of printing a notice",
    )
    parser.add_argument(
        "--no-headings",
        action="store_true",
        help="omit the section headings",
    )
    parser.add_argument(
        "--transcript",
        default=None,
        help="also append every output line to this file",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    fallback = FALLBACK_SILENT if args.silent else env.get_fallback()
    headings = env.headings_enabled() and not args.no_headings
    transcript = args.transcript or env.get_transcript_path()
    env.log_configuration_once(fallback=fallback, headings=headings, transcript=transcript)

    bus = FeedbackBus()
    bus.subscribe(ConsoleSink().handle)
    if transcript:
        bus.subscribe(LogSink(file_path=transcript).handle)

    registry = extended_registry() if args.with_shoot else default_registry()
    dispatcher = Dispatcher(bus, registry, fallback=fallback, headings=headings)
    dispatcher.run(build_roster(args.roster, bus))
    LOG.debug("dispatch finished events=%d", len(bus.drain()))
    return 0


def setup_logging() -> None:
    """Log to a file under the configured directory, or not at all."""

    if not env.logging_enabled():
        # Silence root logger and clear any default handlers when logging is disabled.
        logging.disable(logging.CRITICAL)
        logging.getLogger().handlers.clear()
        return

    level = logging.DEBUG if env.debug_enabled() else logging.INFO
    log_dir = env.get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_dir / "skirmish.log", encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def run() -> None:
    setup_logging()
    sys.exit(main())
