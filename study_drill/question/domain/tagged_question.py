"""TaggedQuestion domain value object — one question/answer pair with its tags."""

from pydantic import BaseModel, Field


class TaggedQuestion(BaseModel, frozen=True):
    """Immutable question/answer pair labelled with free-form tags.

    Tags keep their original order so a question survives a round trip through
    its text record unchanged. Tag membership is case-insensitive.
    """

    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    tags: tuple[str, ...] = ()

    def has_tag(self, tag: str) -> bool:
        wanted = tag.casefold()
        return any(existing.casefold() == wanted for existing in self.tags)
