"""Classifier — the capability shared by every yes/no reply classifier.

Any callable taking the learner's reply and returning True for "yes" qualifies;
implementations are plain functions or closures, not subclasses.
"""

from collections.abc import Callable
from typing import TypeAlias

Classifier: TypeAlias = Callable[[str], bool]
DistanceFn: TypeAlias = Callable[[str, str], int]
