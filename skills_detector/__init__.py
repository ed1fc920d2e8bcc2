"""Detect project characteristics and recommend matching skills."""

from .detectors import detect, detect_path
from .manifest import build_context
from .models import (
    CharacteristicsReport,
    DetectionRule,
    SignalContext,
    SkillEntry,
    SkillReference,
)

__version__ = "0.1.0"

__all__ = [
    "CharacteristicsReport",
    "DetectionRule",
    "SignalContext",
    "SkillEntry",
    "SkillReference",
    "__version__",
    "build_context",
    "detect",
    "detect_path",
]
