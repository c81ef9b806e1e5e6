#!/usr/bin/env python3
"""
Logging utilities for hardenscan
"""

import logging
import sys

import colorlog

LOG_FORMAT = "%(log_color)s%(levelname)-8s%(reset)s %(name)s: %(message)s"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def setup_logger(name: str = "hardenscan", level: int = logging.WARNING) -> logging.Logger:
    """Setup logger with a colored console handler on stderr"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # Reports go to stdout, diagnostics to stderr
    console_handler = colorlog.StreamHandler(sys.stderr)
    console_handler.setFormatter(colorlog.ColoredFormatter(LOG_FORMAT, log_colors=LOG_COLORS))
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger


def get_logger(name: str = "hardenscan") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


def configure_logging_levels(verbose: bool, quiet: bool) -> None:
    """Configure logging levels based on verbosity settings."""
    if quiet:
        level = logging.CRITICAL
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.getLogger("hardenscan").setLevel(level)
    for handler in logging.getLogger("hardenscan").handlers:
        handler.setLevel(level)
