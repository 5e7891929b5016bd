from __future__ import annotations

import importlib.util

MATPLOTLIB_ENABLED = importlib.util.find_spec("matplotlib") is not None
