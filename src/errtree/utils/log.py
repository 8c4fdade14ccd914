# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.logging import RichHandler

from errtree.display import display_tree

if TYPE_CHECKING:
    from rich.console import Console

    from errtree.tree import ErrorTree

LOGGER_NAME = 'errtree'


def configure_logging(level: int | str = logging.WARNING, console: Console | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)

    handler = RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


def log_error_tree(logger: logging.Logger, tree: ErrorTree, level: int = logging.ERROR) -> None:
    if logger.isEnabledFor(level):
        logger.log(level, '%s', display_tree(tree))
