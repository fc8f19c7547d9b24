"""
Core domain layer: dataset model, table parser, view state and the
filter/sort pipeline that derives the displayed projection
"""

from .dataset import Dataset, Row
from .dataset_loader import load_dataset
from .exceptions import GachaBrowserError, HeaderMismatch, LoadError
from .filter_engine import filter_rows
from .projection import current_view, list_locations
from .sort_engine import sort_rows
from .table_parser import parse_table
from .view_state import SortColumn, ViewState

__all__ = [
    "Dataset",
    "Row",
    "load_dataset",
    "GachaBrowserError",
    "HeaderMismatch",
    "LoadError",
    "filter_rows",
    "current_view",
    "list_locations",
    "sort_rows",
    "parse_table",
    "SortColumn",
    "ViewState",
]
