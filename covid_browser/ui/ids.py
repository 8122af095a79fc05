from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"

    class Control:
        # Core selectors
        DATASET_SELECT = "dataset-select"
        VIEW_SELECT = "view-select"

        COUNTY_SELECT = "county-select"
        MODE_RADIO = "mode-radio"
        MONTH_RANGE = "month-range-slider"
        YEAR_SELECT = "year-select"
        DATE_RANGE = "date-range-picker"

        OPTIONS_CHECKLIST = "options-checklist"

        # Sidebar / metadata
        SIDEBAR_DATASET_NAME = "sidebar-dataset-name"
        SIDEBAR_DATASET_META = "sidebar-dataset-meta"

        # Filters (containers)
        COUNTY_FILTER_CONTAINER = "county-filter-container"
        MODE_CONTAINER = "mode-container"
        MONTH_FILTER_CONTAINER = "month-filter-container"
        YEAR_FILTER_CONTAINER = "year-filter-container"
        DATE_FILTER_CONTAINER = "date-filter-container"
        OPTIONS_CONTAINER = "options-container"

        # Graph + downloads
        MAIN_GRAPH = "main-graph"
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"

        # Status bar
        STATUS_BAR = "status-bar"
