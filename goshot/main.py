#!/usr/bin/env python3
"""goshot entry point: capture every display to a timestamped PNG."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from . import __version__
from .capture import ScreenCapture
from .core import CancellationToken, CapturePipeline, SignalCancellationSource, load_config
from .utils import FileUtils

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GOSHOT_CONFIG"


class GoshotApp:
    """Single screenshot run wired from config, screen and a cancellation token."""

    def __init__(self, config_file: str = "", screen_factory=None):
        self.config_file = config_file
        self.screen_factory = screen_factory
        self.config = None
        self.token = CancellationToken()

    def setup(self) -> None:
        self.config = load_config(self.config_file)
        if FileUtils.ensure_directory_exists(self.config.path):
            logger.info(f"Created output directory {self.config.path}")

    def run(self):
        if self.config is None:
            raise RuntimeError("Config not loaded. Call setup() first.")
        self.token.raise_if_cancelled()

        screen_factory = self.screen_factory or ScreenCapture
        with screen_factory() as screen:
            pipeline = CapturePipeline(self.config, screen, self.token)
            return pipeline.run()


def setup_args() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goshot",
        description="A lightweight screenshot tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s                      # Save every display to the current directory
  %(prog)s -c goshot.yaml       # Use the output path from a config file
  {CONFIG_ENV_VAR}=goshot.yaml %(prog)s
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        default=os.getenv(CONFIG_ENV_VAR, ""),
        help=f"Load configuration from FILE (env: {CONFIG_ENV_VAR})",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging and tracebacks")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = setup_args().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        app = GoshotApp(config_file=args.config)
        # Signals during setup cancel the run as well
        with SignalCancellationSource(app.token):
            app.setup()
            app.run()
        return 0

    except Exception as e:
        logger.debug(f"Run failed: {e!r}")
        print(e)
        if args.debug:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
