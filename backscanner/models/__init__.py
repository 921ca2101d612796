"""Data models package."""

from .options import ScannerOptions

__all__ = ["ScannerOptions"]
