"""StudyRunner — drives a study session from first question to completion."""

from study_drill.classifier.domain.classifier import Classifier
from study_drill.question.domain.queue import QuestionQueue
from study_drill.question.domain.stage import QueueStage
from study_drill.study.domain.observer import StudyObserver
from study_drill.study.domain.prompter import Prompter
from study_drill.study.domain.result import StudyResult
from study_drill.study.domain.session import StudySession


def render_prompt(queue: QuestionQueue) -> str | None:
    """Return the text shown to the learner for the queue's current stage."""
    text = queue.current_text()
    if text is None:
        return None
    if queue.stage == QueueStage.QUESTIONING:
        return f"Question: {text}\nPress Enter to view the answer..."
    return f"Answer: {text}. Were you right? (Y/N)"


class StudyRunner:
    """Loops prompt, reply, transition until every question is retired.

    Free of infrastructure: the prompter and observer are injected, and the
    classifier is supplied per run.
    """

    def __init__(self, prompter: Prompter, observer: StudyObserver) -> None:
        self._prompter = prompter
        self._observer = observer

    def run(self, queue: QuestionQueue, classifier: Classifier) -> StudyResult:
        """Run a session over queue and return how many attempts it took."""
        session = StudySession(queue=queue)
        self._observer.session_started(total_questions=queue.size())

        while not session.completed:
            session = self._step(session=session, classifier=classifier)

        result = StudyResult(questions=queue.size(), attempts=session.attempts)
        self._observer.session_completed(
            questions=result.questions, attempts=result.attempts
        )
        return result

    def _step(self, session: StudySession, classifier: Classifier) -> StudySession:
        """Show the current prompt, read one reply, and return the next session."""
        current = session.queue.current_question()
        prompt = render_prompt(session.queue)
        assert current is not None and prompt is not None

        answering = session.queue.stage == QueueStage.ANSWERING
        if not answering:
            self._observer.question_shown(question=current.question)

        reply = self._prompter.ask(prompt)
        next_session = session.respond(reply, classifier)

        if answering:
            self._observer.answer_judged(
                question=current.question,
                reply=reply,
                correct=len(next_session.queue.retired) > len(session.queue.retired),
                remaining=next_session.queue.size(),
            )
        return next_session
