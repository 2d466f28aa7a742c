"""Text encoding of a TaggedQuestion: ``question|answer|tag1,tag2``."""

from study_drill.question.domain.errors import QuestionFormatError
from study_drill.question.domain.tagged_question import TaggedQuestion

FIELD_SEPARATOR = "|"
TAG_SEPARATOR = ","


def parse_question(record: str) -> TaggedQuestion:
    """
    Parse one ``question|answer|tags`` record into a TaggedQuestion.

    Blank tags are dropped, so ``"Q|A|"`` yields a question with no tags.
    Fields after the third are ignored.

    Raises:
        QuestionFormatError: if the record has fewer than three fields, or the
            question or answer field is blank.
    """
    fields = record.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) < 3:
        raise QuestionFormatError(
            record=record, reason=f"expected 3 fields, found {len(fields)}"
        )

    question, answer, raw_tags = (field.strip() for field in fields[:3])
    if not question:
        raise QuestionFormatError(record=record, reason="question is blank")
    if not answer:
        raise QuestionFormatError(record=record, reason="answer is blank")

    tags = tuple(tag.strip() for tag in raw_tags.split(TAG_SEPARATOR) if tag.strip())
    return TaggedQuestion(question=question, answer=answer, tags=tags)


def format_question(question: TaggedQuestion) -> str:
    """Serialize a TaggedQuestion back into its record form.

    Raises:
        QuestionFormatError: if a field contains a separator and could not be
            parsed back.
    """
    record = FIELD_SEPARATOR.join(
        [question.question, question.answer, TAG_SEPARATOR.join(question.tags)]
    )
    if FIELD_SEPARATOR in question.question or FIELD_SEPARATOR in question.answer:
        raise QuestionFormatError(
            record=record, reason=f"field contains {FIELD_SEPARATOR!r}"
        )
    if any(TAG_SEPARATOR in tag or FIELD_SEPARATOR in tag for tag in question.tags):
        raise QuestionFormatError(record=record, reason="tag contains a separator")
    return record
