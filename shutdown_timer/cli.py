from __future__ import annotations

import argparse
import functools
import logging
from typing import Sequence

from . import commands
from .config import load_settings, parse_level
from .log import setup_logging
from .model import OutOfRangeError, TimerInputModel

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shutdown-timer",
        description="Agenda ou cancela o desligamento do Windows após um intervalo.",
    )
    parser.add_argument("--hours", type=int, help="Horas até o desligamento (0-24).")
    parser.add_argument("--minutes", type=int, help="Minutos até o desligamento (0-60).")
    parser.add_argument("--seconds", type=int, help="Segundos até o desligamento (0-60).")
    parser.add_argument("--abort", action="store_true", help="Cancela o desligamento agendado e sai.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Apenas registra os comandos no log, sem executá-los.",
    )
    parser.add_argument("--log-level", help="Nível de log (padrão: INFO).")
    return parser


def build_model(dry_run: bool) -> TimerInputModel:
    return TimerInputModel(
        schedule_shutdown=functools.partial(commands.schedule_shutdown, dry_run=dry_run),
        cancel_shutdown=functools.partial(commands.cancel_shutdown, dry_run=dry_run),
    )


def _run_headless(model: TimerInputModel, args: argparse.Namespace, dry_run: bool = False) -> int:
    if args.abort:
        model.request_abort()
        return 0

    try:
        model.set_hours(args.hours or 0)
        model.set_minutes(args.minutes or 0)
        model.set_seconds(args.seconds or 0)
    except OutOfRangeError as exc:
        logger.error("%s", exc)
        return 2

    if not model.request_shutdown():
        logger.error("Select a delay greater than zero.")
        return 1
    if dry_run:
        logger.info("Dry run: would schedule shutdown in %d seconds.", model.total_seconds())
    else:
        logger.info("Shutdown scheduled in %d seconds.", model.total_seconds())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Abre a janela ou executa os comandos sem interface."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.abort and any(value is not None for value in (args.hours, args.minutes, args.seconds)):
        parser.error("--abort não pode ser combinado com --hours/--minutes/--seconds.")

    settings = load_settings()
    setup_logging(parse_level(args.log_level) if args.log_level else settings.log_level)
    dry_run = args.dry_run or settings.dry_run
    model = build_model(dry_run=dry_run)

    headless = args.abort or any(value is not None for value in (args.hours, args.minutes, args.seconds))
    if not headless:
        from . import gui

        gui.launch(model)
        return 0

    try:
        return _run_headless(model, args, dry_run=dry_run)
    except OSError as exc:
        logger.error("Unable to run shutdown command: %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
