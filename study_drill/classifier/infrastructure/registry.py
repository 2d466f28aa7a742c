"""Classifier registry — maps ClassifierConfig.type to a Classifier."""

from study_drill.classifier.domain.classifier import Classifier
from study_drill.classifier.domain.naive import naive_classifier
from study_drill.classifier.domain.nearest_neighbor import make_knn_classifier
from study_drill.classifier.infrastructure.errors import ClassifierTypeNotSupportedError
from study_drill.config.domain.config import ClassifierConfig

KNN_TYPE = "knn"
NAIVE_TYPE = "naive"


def create_classifier(config: ClassifierConfig) -> Classifier:
    """Return the classifier named by config.type.

    Raises:
        ClassifierTypeNotSupportedError: if config.type is not a known classifier type.
    """
    if config.type == KNN_TYPE:
        return make_knn_classifier(k=config.k)
    if config.type == NAIVE_TYPE:
        return naive_classifier

    raise ClassifierTypeNotSupportedError(classifier_type=config.type)
