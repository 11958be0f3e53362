"""Edit distance helpers used for "did you mean" suggestions."""

from typing import Iterable, Optional


def edit_distance(first: str, second: str) -> int:
    """Levenshtein distance between two strings.

    Args:
        first: String to compare.
        second: String to compare against.

    Returns:
        Minimum number of single character insertions, deletions or
        substitutions turning ``first`` into ``second``.
    """
    if first == second:
        return 0
    if not first:
        return len(second)
    if not second:
        return len(first)

    previous = list(range(len(second) + 1))
    for i, first_char in enumerate(first, start=1):
        current = [i]
        for j, second_char in enumerate(second, start=1):
            cost = 0 if first_char == second_char else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current

    return previous[-1]


def closest_match(
    attempt: str,
    candidates: Iterable[str],
    case_sensitive: bool = True,
) -> Optional[str]:
    """Find the candidate with minimal edit distance to ``attempt``.

    Ties keep the earliest candidate.

    Args:
        attempt: The string that failed to match.
        candidates: Strings to compare against.
        case_sensitive: Compare casefolded strings when False.

    Returns:
        The closest candidate as given, or None if there are no candidates.
    """
    target = attempt if case_sensitive else attempt.casefold()
    best = None
    best_distance = None

    for candidate in candidates:
        compared = candidate if case_sensitive else candidate.casefold()
        distance = edit_distance(target, compared)
        if best_distance is None or distance < best_distance:
            best = candidate
            best_distance = distance

    return best
