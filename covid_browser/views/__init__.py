from .cases_scatter_view import CasesScatterView
from .county_totals_view import CountyTotalsView
from .cases_table_view import CasesTableView

__all__ = ["CasesScatterView", "CountyTotalsView", "CasesTableView"]
