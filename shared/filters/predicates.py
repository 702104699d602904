from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from sqlalchemy import and_, func, or_, true
from sqlalchemy.sql.elements import ColumnElement

from shared.filters.calendar import month_of, year_of
from shared.filters.normalizer import normalize, normalize_month


class Dimension(str, Enum):
    category = "category"
    theme = "theme"
    language = "language"
    region = "region"
    entity = "entity"
    search = "search"
    year = "year"
    month = "month"


class Match(str, Enum):
    exact = "exact"         # trim(col) = value
    folded = "folded"       # upper(trim(col)) = upper(value)
    contains = "contains"   # col1 ILIKE %value% OR col2 ILIKE %value% ...
    year = "year"           # strftime('%Y', trim(col)) = value
    month = "month"         # strftime('%m', trim(col)) = value


@dataclass(frozen=True)
class Clause:
    dimension: Dimension
    value: str


@dataclass(frozen=True)
class FacetField:
    match: Match
    columns: Tuple[Any, ...]
    list_folded: bool = False

    @property
    def column(self):
        return self.columns[0]

    def value_expr(self) -> ColumnElement:
        """The normalized value of this facet as stored (what facet listings return)."""
        if self.match is Match.year:
            return year_of(self.column)
        if self.match is Match.month:
            return month_of(self.column)
        trimmed = func.trim(self.column)
        return func.upper(trimmed) if self.list_folded else trimmed

    def present(self) -> ColumnElement[bool]:
        return and_(self.column.is_not(None), func.trim(self.column) != "")

    def render(self, value: str) -> ColumnElement[bool]:
        if self.match is Match.contains:
            like = f"%{value}%"
            return or_(*(c.ilike(like) for c in self.columns))
        if self.match is Match.folded:
            return func.upper(func.trim(self.column)) == func.upper(value)
        if self.match is Match.exact:
            return func.trim(self.column) == value
        return self.value_expr() == value


def facet(match: Match, *columns, list_folded: bool = False) -> FacetField:
    return FacetField(match=match, columns=tuple(columns), list_folded=list_folded)


class FacetSchema:
    """
    Per-dataset mapping of filter dimensions to columns and comparison rules.

    Selections are turned into an ordered list of ``Clause`` once, then rendered to
    SQLAlchemy expressions. Values always travel as bound parameters.
    """

    def __init__(self, fields: Mapping[Dimension, FacetField]):
        self.fields: Dict[Dimension, FacetField] = dict(fields)

    def field(self, dimension: Dimension) -> FacetField:
        return self.fields[dimension]

    def clauses(self, selection: Mapping[Any, Any]) -> List[Clause]:
        # unknown keys and absent values contribute nothing
        picked: Dict[Dimension, Any] = {}
        for key, raw in selection.items():
            try:
                picked[Dimension(key)] = raw
            except ValueError:
                continue

        out: List[Clause] = []
        for dim, fld in self.fields.items():
            if dim not in picked:
                continue
            value = normalize_month(picked[dim]) if fld.match is Match.month else normalize(picked[dim])
            if value is not None:
                out.append(Clause(dim, value))
        return out

    def render(self, clauses: Iterable[Clause]) -> List[ColumnElement[bool]]:
        return [self.fields[c.dimension].render(c.value) for c in clauses if c.dimension in self.fields]

    def where(self, clauses: Iterable[Clause]) -> ColumnElement[bool]:
        terms = self.render(clauses)
        return and_(*terms) if terms else true()

    @staticmethod
    def value(clauses: Iterable[Clause], dimension: Dimension) -> Optional[str]:
        for c in clauses:
            if c.dimension is dimension:
                return c.value
        return None
