"""k-nearest-neighbor yes/no classification over labeled reference phrases."""

from collections.abc import Sequence

from study_drill.classifier.domain.classifier import Classifier, DistanceFn
from study_drill.classifier.domain.edit_distance import edit_distance
from study_drill.classifier.domain.examples import YES_NO_EXAMPLES
from study_drill.classifier.domain.labeled_example import LabeledExample

DEFAULT_K = 3


def nearest_neighbor_label(
    query: str,
    examples: Sequence[LabeledExample],
    distance: DistanceFn,
    k: int,
) -> tuple[bool, int]:
    """
    Predict a label for query by majority vote of its k nearest examples.

    Examples are ordered by ascending distance to the query; equally distant
    examples keep their reference order. Returns the winning label and the
    number of neighbors that voted for it. A tied vote resolves to False.

    Raises:
        ValueError: if k is negative.
    """
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    neighbors = sorted(examples, key=lambda item: distance(query, item.example))[:k]
    yes_votes = sum(1 for item in neighbors if item.label)
    no_votes = len(neighbors) - yes_votes
    if yes_votes > no_votes:
        return True, yes_votes
    return False, no_votes


def find_exact_match(
    query: str, examples: Sequence[LabeledExample]
) -> LabeledExample | None:
    """Return the first example equal to query, ignoring case."""
    wanted = query.casefold()
    for item in examples:
        if item.example.casefold() == wanted:
            return item
    return None


def make_knn_classifier(
    examples: Sequence[LabeledExample] = YES_NO_EXAMPLES,
    distance: DistanceFn = edit_distance,
    k: int = DEFAULT_K,
) -> Classifier:
    """Build a classifier that looks the reply up before falling back to k-NN.

    Raises:
        ValueError: if k is negative.
    """
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    reference = tuple(examples)

    def classify(query: str) -> bool:
        match = find_exact_match(query, reference)
        if match is not None:
            return match.label
        label, _ = nearest_neighbor_label(
            query=query, examples=reference, distance=distance, k=k
        )
        return label

    return classify


classify: Classifier = make_knn_classifier()
