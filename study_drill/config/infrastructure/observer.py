"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str) -> None:
        self._log.info("config.loaded", name=name)

    def config_even_k_warning(self, k: int) -> None:
        self._log.warning(
            "config.even_k_warning",
            k=k,
            message="An even k can tie the neighbor vote; ties resolve to 'no'",
        )
