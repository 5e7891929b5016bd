from __future__ import annotations

import importlib.metadata

__all__ = ["__version__"]

try:
    __version__ = importlib.metadata.version("fastwavelets")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"
