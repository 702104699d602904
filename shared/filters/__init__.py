from shared.filters.facets import FacetResolver
from shared.filters.normalizer import normalize, normalize_flag, normalize_month
from shared.filters.pagination import Page, paginate
from shared.filters.predicates import Clause, Dimension, FacetField, FacetSchema, Match, facet

__all__ = [
    "Clause",
    "Dimension",
    "FacetField",
    "FacetResolver",
    "FacetSchema",
    "Match",
    "Page",
    "facet",
    "normalize",
    "normalize_flag",
    "normalize_month",
    "paginate",
]
