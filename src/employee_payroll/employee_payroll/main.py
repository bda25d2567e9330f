from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from dotenv import load_dotenv

from .common.logging_config import configure_logging
from .config import get_settings_module, load_settings
from .console.io import Console, StdConsole
from .console.use_cases import USE_CASES
from .container import build_container
from .core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="employee-payroll",
        description="Employee payroll use cases (registration, login, payslips, dashboards, validation).",
    )
    parser.add_argument("use_case", choices=sorted(USE_CASES), help="which use case to run")
    parser.add_argument("--settings", default=None, help="settings module (defaults to APP_ENV selection)")
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    load_dotenv(override=False)
    args = build_parser().parse_args(argv)

    settings_module = args.settings or get_settings_module()
    try:
        settings = load_settings(settings_module)
        configure_logging(settings.log_level, settings.log_file)
        container = build_container(settings=settings)
    except ConfigurationError as e:
        logger.critical("Cannot start: %s", e)
        print(f"Configuration error: {e}")
        return 2

    if settings.debug:
        logger.debug("settings=%s data_dir=%s export_dir=%s", settings_module, settings.data_dir, settings.export_dir)

    console = console or StdConsole()
    try:
        return USE_CASES[args.use_case](container, console)
    except (EOFError, KeyboardInterrupt):
        console.write("\nAborted.")
        return 130
    except Exception:
        logger.exception("Use case %r failed", args.use_case)
        console.write("\nUnexpected error, see the log for details.")
        return 1
