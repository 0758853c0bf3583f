"""Logging configuration for dupfinder."""

from __future__ import annotations

from tqdm import tqdm

import logging
import sys


class TqdmHandler(logging.StreamHandler):
    """Emit records through tqdm so they do not tear an active progress bar."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=self.stream)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the dupfinder root logger on stderr.

    stdout is reserved for the duplicate report.
    """
    if verbose:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(message)s"
    elif quiet:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.INFO
        fmt = "%(message)s"

    root_logger = logging.getLogger("dupfinder")
    root_logger.handlers.clear()
    handler = TqdmHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
