# This file stores user-facing copy for the admin list dashboard.
# It exists so labels and empty states stay consistent across screens.

APP_TITLE = "Admin Dashboard"
APP_SUBTITLE = "Search, filter, and page through records. The address bar always reflects the current view."
EMPTY_RESULTS = "No records match the current filters."
CLEAR_FILTERS_LABEL = "Clear filters"
ROWS_PER_PAGE_LABEL = "Rows per page"
SEARCH_PLACEHOLDER = "Search..."
