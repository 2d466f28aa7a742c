"""StudySession — a question queue plus the attempts made against it."""

from pydantic import BaseModel, Field

from study_drill.classifier.domain.classifier import Classifier
from study_drill.question.domain.queue import QuestionQueue
from study_drill.question.domain.stage import QueueStage


class StudySession(BaseModel, frozen=True):
    """Immutable snapshot of a study session.

    The classifier is passed to respond() on every call rather than stored, so
    one session value can be continued with different classifiers.
    """

    queue: QuestionQueue
    attempts: int = Field(default=0, ge=0)

    @property
    def completed(self) -> bool:
        return self.queue.stage == QueueStage.COMPLETED

    def respond(self, reply: str, classifier: Classifier) -> "StudySession":
        """
        Advance the session with the learner's reply.

        While a question is showing the reply only reveals the answer. While an
        answer is showing, the classifier decides whether the learner was right
        and the queue is judged accordingly. A completed session is returned
        unchanged.
        """
        if self.queue.stage == QueueStage.QUESTIONING:
            return StudySession(queue=self.queue.reveal(), attempts=self.attempts)
        if self.queue.stage == QueueStage.ANSWERING:
            return StudySession(
                queue=self.queue.judge(classifier(reply)),
                attempts=self.attempts + 1,
            )
        return self
