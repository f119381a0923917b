"""DeepClean data models."""

from deepclean.models.config import CleanConfig
from deepclean.models.scan_result import ScanResult
from deepclean.models.clean_result import CleanResult

__all__ = [
    "CleanConfig",
    "CleanResult",
    "ScanResult",
]
