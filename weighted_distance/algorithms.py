import numpy as np

from .costs import _code_point, substitution_cost

# Infinity constant
DTYPE_MAX = float('inf')

def _to_ords(s):
    """
    Helper to convert a string to a list of Unicode integer code points.
    'a' -> 97, 'é' -> 233, b'a' -> [97], ['a', 98] -> [97, 98]
    """
    if isinstance(s, str):
        return [ord(c) for c in s]
    if isinstance(s, (bytes, bytearray)):
        return [b for b in s]
    return [_code_point(c) for c in s]

def lcs_distance(str1, str2, costs):
    """
    Weighted longest-common-subsequence score.

    Every shared character is worth addition + deletion, the pair of
    single-character edits it saves.  This is a similarity-like value:
    the bottom-right cell grows with the weight of the shared
    subsequence, it is not a minimal edit count.
    """
    s1 = _to_ords(str1)
    s2 = _to_ords(str2)
    len1 = len(s1)
    len2 = len(s2)

    match_weight = costs.addition + costs.deletion

    # Row 0 and column 0 stay at zero
    d = np.zeros((len1 + 1, len2 + 1), dtype=float)

    for i in range(1, len1 + 1):
        char_i = s1[i - 1]
        for j in range(1, len2 + 1):
            if char_i == s2[j - 1]:
                d[i, j] = d[i - 1, j - 1] + match_weight
            else:
                d[i, j] = max(d[i - 1, j], d[i, j - 1])

    return d[len1, len2]

lcs = lcs_distance


def levenshtein(str1, str2, costs, overrides=None):
    """
    Calculates the Levenshtein distance supporting full Unicode.

    :param costs: CostProfile supplying addition/deletion/substitution
    :param overrides: SubstitutionOverrides or None
    """
    s1 = _to_ords(str1)
    s2 = _to_ords(str2)
    len1 = len(s1)
    len2 = len(s2)

    d = np.zeros((len1 + 1, len2 + 1), dtype=float)

    # Boundary cells count edits, not weights
    d[:, 0] = np.arange(len1 + 1)
    d[0, :] = np.arange(len2 + 1)

    for i in range(1, len1 + 1):
        char_i = s1[i - 1]
        for j in range(1, len2 + 1):
            char_j = s2[j - 1]
            d[i, j] = min(
                d[i - 1, j - 1] + substitution_cost(char_i, char_j, costs, overrides),
                d[i - 1, j] + costs.deletion,
                d[i, j - 1] + costs.addition
            )

    return d[len1, len2]

lev = levenshtein


def optimal_string_alignment(str1, str2, costs, overrides=None):
    """
    Calculates the Optimal String Alignment distance supporting full Unicode.

    Only adjacent swaps that do not share a character with another
    swap are found; "ca" -> "abc" costs 3 here but 2 under
    damerau_levenshtein.
    """
    s1 = _to_ords(str1)
    s2 = _to_ords(str2)
    len1 = len(s1)
    len2 = len(s2)

    d = np.zeros((len1 + 1, len2 + 1), dtype=float)

    # Boundary cells count edits, not weights
    d[:, 0] = np.arange(len1 + 1)
    d[0, :] = np.arange(len2 + 1)

    for i in range(1, len1 + 1):
        char_i = s1[i - 1]
        for j in range(1, len2 + 1):
            char_j = s2[j - 1]

            d[i, j] = min(
                d[i - 1, j] + costs.deletion,
                d[i, j - 1] + costs.addition,
                d[i - 1, j - 1] + substitution_cost(char_i, char_j, costs, overrides)
            )

            if i > 1 and j > 1:
                prev_char_i = s1[i - 2]
                prev_char_j = s2[j - 2]

                if char_i == prev_char_j and prev_char_i == char_j:
                    d[i, j] = min(
                        d[i, j],
                        d[i - 2, j - 2] + costs.transposition
                    )

    return d[len1, len2]

osa = optimal_string_alignment


def damerau_levenshtein(str1, str2, costs):
    """
    Calculates the Damerau-Levenshtein distance supporting full Unicode.

    The table has no empty-prefix row or column: cell (i, j) is the cost
    of turning s1[:i + 1] into s2[:j + 1].  Only the scalar substitution
    weight is used here; per-pair overrides do not apply.
    """
    s1 = _to_ords(str1)
    s2 = _to_ords(str2)
    len1 = len(s1)
    len2 = len(s2)

    # No cells to fill when one side is empty
    if len1 == 0:
        return len2 * costs.addition
    if len2 == 0:
        return len1 * costs.deletion

    add = costs.addition
    dele = costs.deletion
    sub = costs.substitution

    # last_row: last row of s1 in which a character was seen.
    # Local to this call so nothing leaks between unrelated inputs.
    last_row = {}

    d = np.zeros((len1, len2), dtype=float)

    if s1[0] != s2[0]:
        d[0, 0] = min(sub, dele + add)
    last_row[s1[0]] = 0

    # Column 0: s1[:i + 1] -> s2[0]
    for i in range(1, len1):
        d[i, 0] = min(
            d[i - 1, 0] + dele,
            (i + 1) * dele + add,
            i * dele + (0 if s1[i] == s2[0] else sub)
        )

    # Row 0: s1[0] -> s2[:j + 1]
    for j in range(1, len2):
        d[0, j] = min(
            (j + 1) * add + dele,
            d[0, j - 1] + add,
            j * add + (0 if s1[0] == s2[j] else sub)
        )

    for i in range(1, len1):
        char_i = s1[i]
        # Last column in this row where s2 matched char_i, -1 for none
        last_match_col = 0 if char_i == s2[0] else -1

        for j in range(1, len2):
            char_j = s2[j]
            i_swap = last_row.get(char_j)
            j_swap = last_match_col

            c_del = d[i - 1, j] + dele
            c_ins = d[i, j - 1] + add
            if char_i == char_j:
                c_sub = d[i - 1, j - 1]
                last_match_col = j
            else:
                c_sub = d[i - 1, j - 1] + sub

            if i_swap is not None and j_swap != -1:
                if i_swap == 0 and j_swap == 0:
                    pre_swap = 0.0
                else:
                    pre_swap = d[max(0, i_swap - 1), max(0, j_swap - 1)]
                c_trans = (pre_swap +
                           (i - i_swap - 1) * dele +
                           (j - j_swap - 1) * add +
                           costs.transposition)
            else:
                c_trans = DTYPE_MAX

            d[i, j] = min(c_del, c_ins, c_sub, c_trans)

        last_row[char_i] = i

    return d[len1 - 1, len2 - 1]

dam_lev = damerau_levenshtein
