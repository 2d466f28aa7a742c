"""Reference phrases for the yes/no nearest-neighbor classifier.

Order matters: distance ties between neighbors are broken by position here.
"""

from study_drill.classifier.domain.labeled_example import LabeledExample

YES_NO_EXAMPLES: tuple[LabeledExample, ...] = (
    LabeledExample(example="yes", label=True),
    LabeledExample(example="y", label=True),
    LabeledExample(example="indeed", label=True),
    LabeledExample(example="aye", label=True),
    LabeledExample(example="oh yes", label=True),
    LabeledExample(example="affirmative", label=True),
    LabeledExample(example="roger", label=True),
    LabeledExample(example="uh huh", label=True),
    LabeledExample(example="true", label=True),
    LabeledExample(example="no", label=False),
    LabeledExample(example="n", label=False),
    LabeledExample(example="nope", label=False),
    LabeledExample(example="negative", label=False),
    LabeledExample(example="nay", label=False),
    LabeledExample(example="negatory", label=False),
    LabeledExample(example="uh uh", label=False),
    LabeledExample(example="absolutely not", label=False),
    LabeledExample(example="false", label=False),
)
