from dataclasses import dataclass

@dataclass(frozen=True)
class FilterProfile:
    """
    Represents the widget dependencies for different views.

    Fields:

    :param counties: the county widget
    :param month_range: the month range slider (month & year mode)
    :param year: the year dropdown (month & year mode)
    :param date_range: the date picker (date range mode)
    :param log_scale: the log-scale switch
    """
    counties: bool = True
    month_range: bool = True
    year: bool = True
    date_range: bool = True
    log_scale: bool = False
