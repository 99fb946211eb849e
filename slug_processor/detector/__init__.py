"""Detector module for inferring deployment parameters from marker files.

Public API:
    detect_app_type(repo_dir) -> AppType
    analyze_repository(repo_dir) -> RepositoryAnalysis
"""

from slug_processor.detector.analyzer import analyze_repository
from slug_processor.detector.app_type import detect_app_type
from slug_processor.detector.types import AppType, RepositoryAnalysis

__all__ = ["analyze_repository", "detect_app_type", "AppType", "RepositoryAnalysis"]
