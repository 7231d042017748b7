"""Shared utilities for the roster pipeline."""

from roster.utils.io import list_source_files, read_text_lines, write_lines
from roster.utils.transforms import format_fixed, round_half_up
from roster.utils.validators import require_valid, validate_dataframe
from roster.utils.types import OutputMode, RunStatus, SortField, SortOrder, SourceFileSummary
