"""
Cost configuration: the four scalar weights and the per-pair
substitution overrides that replace the scalar substitution weight.
"""

from numbers import Integral, Real

from .errors import InconsistentCosts, InvalidCost, InvalidInput

COST_NAMES = ("addition", "deletion", "substitution", "transposition")


def _check_cost(name, value):
    # bool is a Real; reject it along with NaN and non-numbers
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidCost(name, value)
    if not value > 0:
        raise InvalidCost(name, value)
    return float(value)


def _code_point(c):
    """
    Helper to turn a single character into its integer code point.
    'a' -> 97, 97 -> 97
    """
    if isinstance(c, str) and len(c) == 1:
        return ord(c)
    if isinstance(c, Integral) and not isinstance(c, bool) and c >= 0:
        return int(c)
    raise InvalidInput(f"Expected a single character or code point, got {c!r}")


class CostProfile:
    """
    The four operation weights shared by every algorithm.

    Each weight must be strictly positive.  The combination must also
    satisfy ``2 * transposition >= addition + deletion``; since the
    weights can be set in any order this is only enforced by
    :meth:`check_consistency`, which the engine calls before each
    computation.
    """

    __slots__ = ("addition", "deletion", "substitution", "transposition")

    def __init__(self, addition=1.0, deletion=1.0, substitution=1.0,
                 transposition=1.0):
        self.addition = _check_cost("addition", addition)
        self.deletion = _check_cost("deletion", deletion)
        self.substitution = _check_cost("substitution", substitution)
        self.transposition = _check_cost("transposition", transposition)

    def set(self, name, value):
        if name not in COST_NAMES:
            raise KeyError(name)
        setattr(self, name, _check_cost(name, value))

    def check_consistency(self):
        if 2 * self.transposition < self.addition + self.deletion:
            raise InconsistentCosts(self.addition, self.deletion,
                                    self.transposition)

    def as_dict(self):
        return {name: getattr(self, name) for name in COST_NAMES}

    def copy(self):
        return CostProfile(**self.as_dict())

    def __eq__(self, other):
        if not isinstance(other, CostProfile):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"CostProfile({args})"


class SubstitutionOverrides:
    """
    Symmetric per-pair substitution costs.

    Keys are stored as an ordered pair of code points, so (c1, c2) and
    (c2, c1) resolve to the same rule.  An absent pair means the scalar
    substitution weight applies.
    """

    def __init__(self, rules=None):
        self._rules = {}
        if rules:
            items = rules.items() if hasattr(rules, "items") else rules
            for (c1, c2), cost in items:
                self.add(c1, c2, cost)

    @staticmethod
    def _key(c1, c2):
        a, b = _code_point(c1), _code_point(c2)
        return (a, b) if a <= b else (b, a)

    def add(self, c1, c2, cost):
        cost = _check_cost("substitution override", cost)
        self._rules[self._key(c1, c2)] = cost

    def get(self, c1, c2, default=None):
        return self._rules.get(self._key(c1, c2), default)

    def remove(self, c1, c2):
        """Drop the rule for a pair; returns False if there was none."""
        return self._rules.pop(self._key(c1, c2), None) is not None

    def clear(self):
        self._rules.clear()

    def lookup(self, a, b):
        # hot path: a and b are already code points
        return self._rules.get((a, b) if a <= b else (b, a))

    def items(self):
        return iter(self._rules.items())

    def copy(self):
        return SubstitutionOverrides(self._rules.items())

    def __contains__(self, pair):
        c1, c2 = pair
        return self._key(c1, c2) in self._rules

    def __len__(self):
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __repr__(self):
        return f"SubstitutionOverrides({len(self._rules)} rules)"


def substitution_cost(a, b, costs, overrides=None):
    """Cost of replacing code point ``a`` with ``b``."""
    if a == b:
        return 0.0
    if overrides is not None:
        cost = overrides.lookup(a, b)
        if cost:
            return cost
    return costs.substitution
