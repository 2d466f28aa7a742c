"""First-letter heuristic classifier."""


def naive_classifier(reply: str) -> bool:
    """Treat any reply starting with 'y' or 'Y' as yes."""
    return reply.upper().startswith("Y")
