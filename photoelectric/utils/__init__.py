"""
Photoelectric Utilities Package

Utility functions for data export.
"""

from .data_export import PhotoelectricDataExporter, DataExportError

__all__ = ["PhotoelectricDataExporter", "DataExportError"]
