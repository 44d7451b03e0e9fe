"""Android build.gradle version bump step."""

from .config import BumpConfig
from .logging_utils import configure_logging
from .runner import run_bump
from .versioning import VersionPair

__all__ = ["BumpConfig", "VersionPair", "configure_logging", "run_bump"]
