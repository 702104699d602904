from __future__ import annotations

from typing import Optional

from sqlalchemy import and_, func
from sqlalchemy.sql.elements import ColumnElement

MONTH_NAMES = {
    "01": "January",
    "02": "February",
    "03": "March",
    "04": "April",
    "05": "May",
    "06": "June",
    "07": "July",
    "08": "August",
    "09": "September",
    "10": "October",
    "11": "November",
    "12": "December",
}


def month_name(code: Optional[str]) -> Optional[str]:
    """English month name for a two-digit code; unknown codes are echoed back."""
    return MONTH_NAMES.get(code, code)


def calendar_date(column) -> ColumnElement:
    # date() yields NULL for anything it cannot parse as a calendar date
    return func.date(func.trim(column))


def year_of(column) -> ColumnElement:
    return func.strftime("%Y", func.trim(column))


def month_of(column) -> ColumnElement:
    return func.strftime("%m", func.trim(column))


ISO_DATE_GLOB = "[0-9][0-9][0-9][0-9]-[0-9][0-9]-[0-9][0-9]*"


def has_valid_date(column) -> ColumnElement[bool]:
    # date() also accepts bare numbers as Julian day numbers, so require YYYY-MM-DD first
    return and_(
        column.is_not(None),
        func.trim(column).op("GLOB")(ISO_DATE_GLOB),
        calendar_date(column).is_not(None),
    )


def is_playable(media_column) -> ColumnElement[bool]:
    return and_(media_column.is_not(None), func.trim(media_column) != "")
