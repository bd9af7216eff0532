# This package contains the Streamlit admin dashboard built on the list view-state engine.
# It exists so every list screen shares one address-bar contract for search, filters, sort, and pages.
# The modules separate configuration, screen declarations, data loading, and UI components.

__all__ = ["app", "screens"]
