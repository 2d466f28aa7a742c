"""Levenshtein edit distance between two strings."""


def edit_distance(a: str, b: str) -> int:
    """
    Return the minimum number of single-character insertions, deletions and
    substitutions that turn ``a`` into ``b``.

    Uses the standard dynamic-programming recurrence, keeping only the previous
    row of the cost table, so memory is O(len(b)).
    """
    previous_row = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current_row = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current_row.append(previous_row[j - 1])
            else:
                current_row.append(
                    1
                    + min(
                        previous_row[j],  # deletion
                        current_row[j - 1],  # insertion
                        previous_row[j - 1],  # substitution
                    )
                )
        previous_row = current_row
    return previous_row[-1]
