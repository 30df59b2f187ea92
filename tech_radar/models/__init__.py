from .document import RadarDocument
from .profile import RadarProfile, load_profile
from .radar import Quadrant, RadarEntry, TechRadar, TimelineItem
from .report import CheckResult, ValidationReport

__all__ = [
    "RadarDocument",
    "RadarProfile",
    "load_profile",
    "Quadrant",
    "RadarEntry",
    "TechRadar",
    "TimelineItem",
    "CheckResult",
    "ValidationReport",
]
