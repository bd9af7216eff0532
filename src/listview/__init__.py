# This package contains the list view-state engine shared by every admin list screen.
# It exists so search, filters, sort, and pagination stay consistent with the address-bar query string.
# The modules separate value codecs, immutable state, filtering, pagination, and synchronization.

__all__ = [
    "query_codec",
    "view_state",
    "filter_engine",
    "paginator",
    "query_params",
    "synchronizer",
    "list_view",
]
