"""
Top-level package for the county COVID-19 case browser.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    covid_browser.core
    covid_browser.views
    covid_browser.ui
"""

__all__: list[str] = []
