"""
DistanceEngine: one configured set of costs plus the four table fills.

    engine = DistanceEngine()
    engine.set_substitution_cost(0.5)
    engine.compute("goat", "boat", Variant.SUBSTITUTION)   # 0.5

Each engine owns its own CostProfile and SubstitutionOverrides, so
independently configured engines can live side by side.  An engine is
not safe to mutate from several threads at once; guard it with a lock
or give each thread its own.
"""

from enum import Enum

from loguru import logger

from .algorithms import (
    damerau_levenshtein,
    lcs_distance,
    levenshtein,
    optimal_string_alignment,
)
from .config import EngineSettings
from .costs import CostProfile, SubstitutionOverrides
from .errors import InvalidInput


class Variant(Enum):
    """Which distance compute() runs."""
    DEFAULT = "default"              # LCS-based
    SUBSTITUTION = "substitution"    # Levenshtein
    TRANSPOSITION = "transposition"  # Damerau-Levenshtein
    OSA = "osa"                      # optimal string alignment


def _resolve_variant(variant):
    if isinstance(variant, Variant):
        return variant
    try:
        return Variant(variant.lower() if isinstance(variant, str) else variant)
    except ValueError:
        logger.warning("Unknown variant {!r}, falling back to {}",
                       variant, Variant.DEFAULT.value)
        return Variant.DEFAULT


class DistanceEngine:
    """Configurable edit-distance engine."""

    def __init__(self, costs=None, overrides=None):
        self.costs = costs if costs is not None else CostProfile()
        self.overrides = overrides if overrides is not None else SubstitutionOverrides()

    @classmethod
    def from_settings(cls, settings=None):
        """Build an engine whose weights come from EngineSettings."""
        if settings is None:
            settings = EngineSettings()
        engine = cls()
        engine.set_addition_cost(settings.addition_cost)
        engine.set_deletion_cost(settings.deletion_cost)
        engine.set_substitution_cost(settings.substitution_cost)
        engine.set_transposition_cost(settings.transposition_cost)
        return engine

    # ------------------------------------------------------------------
    # configuration

    def _set_cost(self, name, value):
        self.costs.set(name, value)
        logger.debug("{} cost set to {}", name, value)

    def set_addition_cost(self, cost):
        self._set_cost("addition", cost)

    def set_deletion_cost(self, cost):
        self._set_cost("deletion", cost)

    def set_substitution_cost(self, cost):
        self._set_cost("substitution", cost)

    def set_transposition_cost(self, cost):
        # The 2 * transposition >= addition + deletion rule is checked
        # in compute(), since the other two may still change.
        self._set_cost("transposition", cost)

    @property
    def addition_cost(self):
        return self.costs.addition

    @property
    def deletion_cost(self):
        return self.costs.deletion

    @property
    def substitution_cost(self):
        return self.costs.substitution

    @property
    def transposition_cost(self):
        return self.costs.transposition

    def add_substitution_override(self, c1, c2, cost):
        """Replace the substitution weight for the unordered pair (c1, c2)."""
        self.overrides.add(c1, c2, cost)
        logger.debug("substitution override {!r}<->{!r} = {}", c1, c2, cost)

    def remove_substitution_override(self, c1, c2):
        return self.overrides.remove(c1, c2)

    def clear_substitution_overrides(self):
        self.overrides.clear()

    # ------------------------------------------------------------------
    # computation

    def compute(self, s1, s2, variant=Variant.DEFAULT):
        """
        Distance between ``s1`` and ``s2`` under the current costs.

        Raises InconsistentCosts if the transposition weight is below
        the average of addition and deletion, and InvalidInput if either
        sequence is None.  Identical inputs are 0 for every variant.
        """
        self.costs.check_consistency()
        if s1 is None or s2 is None:
            raise InvalidInput("Input sequences must not be None")

        if s1 == s2:
            return 0.0

        variant = _resolve_variant(variant)
        if variant is Variant.SUBSTITUTION:
            result = levenshtein(s1, s2, self.costs, self.overrides)
        elif variant is Variant.TRANSPOSITION:
            result = damerau_levenshtein(s1, s2, self.costs)
        elif variant is Variant.OSA:
            result = optimal_string_alignment(s1, s2, self.costs, self.overrides)
        else:
            result = lcs_distance(s1, s2, self.costs)

        result = float(result)
        logger.debug("{} distance over {}x{} table: {}",
                     variant.value, len(s1), len(s2), result)
        return result

    def __repr__(self):
        return f"DistanceEngine({self.costs!r}, {self.overrides!r})"


def compute_distance(s1, s2, variant=Variant.DEFAULT, **costs):
    """
    One-shot helper: compute with a throwaway engine.

    Keyword arguments are the weights by name, e.g. ``addition=2``.
    """
    return DistanceEngine(CostProfile(**costs)).compute(s1, s2, variant)
