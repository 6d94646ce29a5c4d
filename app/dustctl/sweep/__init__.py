"""Artifact scanning and cleanup module.

This module provides artifact name matching, breadth-first tree
scanning, concurrent size aggregation, and concurrent deletion with
per-root failure isolation.
"""

from dustctl.sweep.matcher import DEFAULT_ARTIFACT_NAMES, PathMatcher
from dustctl.sweep.models import (
    BatchReport,
    BatchState,
    DeletionOutcome,
    DeletionStatus,
    MatchedRootSet,
)
from dustctl.sweep.operator import DeletionExecutor
from dustctl.sweep.scanner import RootNotFoundError, TreeScanner
from dustctl.sweep.sizer import SizeAggregator

__all__ = [
    "DEFAULT_ARTIFACT_NAMES",
    "BatchReport",
    "BatchState",
    "DeletionExecutor",
    "DeletionOutcome",
    "DeletionStatus",
    "MatchedRootSet",
    "PathMatcher",
    "RootNotFoundError",
    "SizeAggregator",
    "TreeScanner",
]
