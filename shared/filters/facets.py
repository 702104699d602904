from __future__ import annotations

from typing import Iterable, List, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.sql.elements import ColumnElement

from shared.filters.predicates import Clause, Dimension, FacetSchema, Match


class FacetResolver:
    """
    Cascading narrowing: the legal values of one dimension, given the others.

    Each dimension is scoped by every selected clause except its own and the free-text
    search. It is a single pass; the lists are not iterated to a joint fixed point.
    """

    def __init__(self, schema: FacetSchema):
        self.schema = schema

    @staticmethod
    def scope(dimension: Dimension, clauses: Iterable[Clause]) -> List[Clause]:
        return [c for c in clauses if c.dimension not in (dimension, Dimension.search)]

    def query(
        self,
        dimension: Dimension,
        clauses: Iterable[Clause] = (),
        *,
        within: Sequence[ColumnElement[bool]] = (),
        descending: bool = False,
    ) -> Select:
        """Distinct non-blank values of ``dimension``; ``within`` adds row-level conditions."""
        fld = self.schema.field(dimension)
        expr = fld.value_expr()
        conditions = (fld.present(), expr.is_not(None), *within, self.schema.where(self.scope(dimension, clauses)))

        if fld.match is Match.folded and not fld.list_folded:
            # one option per case-insensitive value, listed in a stored spelling
            value = func.max(expr).label("facet_value")
            stmt = select(value).where(*conditions).group_by(func.upper(expr))
        else:
            value = expr.label("facet_value")
            stmt = select(value).distinct().where(*conditions)
        return stmt.order_by(value.desc() if descending else value)
