"""Path resolution, archive access and the extraction engine."""

from .archive import ArchiveEntry, ZipArchive
from .extractor import ExtractionPlan, ExtractionSummary, build_plan, extract, extract_path
from .paths import ResolvedTarget, TargetKind, resolve
from .progress import NullProgress, TqdmProgress

__all__ = [
    "ArchiveEntry",
    "ZipArchive",
    "ExtractionPlan",
    "ExtractionSummary",
    "build_plan",
    "extract",
    "extract_path",
    "ResolvedTarget",
    "TargetKind",
    "resolve",
    "NullProgress",
    "TqdmProgress",
]
