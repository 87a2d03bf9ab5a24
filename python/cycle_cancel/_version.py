"""Version helpers for cycle-cancel."""
from importlib.metadata import PackageNotFoundError, version

__version__ = "0.1.0"
try:
    __version__ = version("cycle-cancel")
except PackageNotFoundError:  # pragma: no cover - fallback for editable/dev installs.
    pass

__all__ = ["__version__"]
