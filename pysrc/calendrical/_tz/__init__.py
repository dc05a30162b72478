from .common import Ambiguity, Fold, Gap, Unambiguous
from .tzif import TimeZone

__all__ = ["TimeZone", "Ambiguity", "Unambiguous", "Gap", "Fold"]
