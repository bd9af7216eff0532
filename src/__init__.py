"""
Package marker for the admin dashboard source tree.
It holds the list view-state engine (`src.listview`), the Streamlit surface (`src.dashboard_admin`), and shared settings.
"""
