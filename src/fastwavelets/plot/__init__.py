from __future__ import annotations

__all__ = [
    "create_colorbar",
    "despine",
    "plot_ledger",
    "plot_modwt",
]
import logging

from .._internal import MATPLOTLIB_ENABLED

logger = logging.getLogger()

if MATPLOTLIB_ENABLED:
    from ._matplotlib import create_colorbar, despine, plot_ledger, plot_modwt
else:
    logger.warning("matplotlib is not installed, not all functions will be available")
