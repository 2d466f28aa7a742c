"""Typer-backed Prompter that reads replies from the terminal."""

import typer


class ConsolePrompter:
    """Prints the prompt and returns the learner's reply, stripped.

    An empty reply is accepted so that Enter alone reveals the answer.
    Satisfies the Prompter protocol structurally.
    """

    def ask(self, text: str) -> str:
        typer.echo(text)
        reply: str = typer.prompt(
            "", default="", show_default=False, prompt_suffix="> "
        )
        return reply.strip()
