"""Data module - Loading and processing."""

from .loader import DataLoader, TracesValidator
from .processor import DataProcessor

__all__ = ['DataLoader', 'TracesValidator', 'DataProcessor']
