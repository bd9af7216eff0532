# This package groups reusable Streamlit components used by every list screen.
# It exists to keep filter controls, tables, and pagers bound to the same list-view contract.

__all__ = ["filters", "pagination", "tables"]
