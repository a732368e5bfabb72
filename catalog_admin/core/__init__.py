"""
Core domain layer: product records, the list view state and the
detail/edit session
"""

from .edit_session import EditForm, EditSession
from .record import Category, Record
from .view_state import SortDirective, ViewState

__all__ = ["Category", "Record", "ViewState", "SortDirective", "EditSession", "EditForm"]
