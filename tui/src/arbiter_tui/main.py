"""Entry point for arbiter-tui."""

from __future__ import annotations

import argparse
import logging

from arbiter_core.controller import DialogController
from arbiter_core.paths import Paths
from arbiter_core.settings import Settings

from .app import ArbiterApp


def main() -> None:
    parser = argparse.ArgumentParser(description="Arbiter TUI")
    parser.add_argument(
        "--data-dir", default="data",
        help="Data directory for settings and logs (default: data)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    paths = Paths(root=args.data_dir)
    paths.ensure_dirs()

    # The terminal belongs to the UI, so logs go to a file.
    logging.basicConfig(
        filename=paths.log_file,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    controller = DialogController(settings=Settings(paths))
    ArbiterApp(controller=controller).run()


if __name__ == "__main__":
    main()
