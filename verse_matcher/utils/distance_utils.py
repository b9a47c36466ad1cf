from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a, b):
    """
    Minimum number of single-character insertions, deletions and
    substitutions needed to turn one string into the other.

    Args:
        a (str): First string
        b (str): Second string

    Returns:
        int: Edit distance
    """
    return Levenshtein.distance(a, b)


def similarity(a, b):
    """
    Normalized Levenshtein similarity between two strings.

        similarity = (max_len - distance) / max_len

    Two empty strings are identical (1.0). The measure is symmetric and a
    string compared with itself always scores exactly 1.0.

    Args:
        a (str): First string
        b (str): Second string

    Returns:
        float: Similarity in [0, 1]
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return (max_len - levenshtein_distance(a, b)) / max_len
