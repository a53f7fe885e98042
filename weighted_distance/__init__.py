"""
weighted_distance
=================

Weighted edit distances between character sequences:

    lcs_distance               weighted longest-common-subsequence score
    levenshtein                insert / delete / substitute
    optimal_string_alignment   + non-overlapping adjacent swaps
    damerau_levenshtein        + adjacent swaps, last-occurrence bookkeeping

DistanceEngine bundles one CostProfile and one SubstitutionOverrides
table with these algorithms and validates the configuration before
every call.
"""

from weighted_distance.algorithms import (
    lcs_distance, lcs,
    levenshtein, lev,
    optimal_string_alignment, osa,
    damerau_levenshtein, dam_lev,
)
from weighted_distance.config import EngineSettings
from weighted_distance.costs import (
    CostProfile, SubstitutionOverrides, substitution_cost,
)
from weighted_distance.engine import DistanceEngine, Variant, compute_distance
from weighted_distance.errors import (
    DistanceError, InvalidCost, InconsistentCosts, InvalidInput,
)
from weighted_distance.logger import configure_logging

__version__ = "0.1.0"
__all__ = [
    "lcs_distance", "lcs", "levenshtein", "lev",
    "optimal_string_alignment", "osa", "damerau_levenshtein", "dam_lev",
    "EngineSettings",
    "CostProfile", "SubstitutionOverrides", "substitution_cost",
    "DistanceEngine", "Variant", "compute_distance",
    "DistanceError", "InvalidCost", "InconsistentCosts", "InvalidInput",
    "configure_logging",
]
