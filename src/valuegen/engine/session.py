"""Evaluation sessions.

A Session owns exactly one random stream and feeds generators sizes on a
cycle from ``size_min`` up to ``size_max - 1``, wrapping around while the
stream keeps advancing. Sessions are not rewindable: to replay a sequence,
create a new session with the same seed.
"""

import itertools
import logging
from typing import Any, Iterator

from valuegen.config.base import SessionConfig
from valuegen.prng import RandomStream, new_stream
from valuegen.utils.helpers import generate_seed

logger = logging.getLogger(__name__)


class Session:
    """One evaluation context: a seeded stream and a size schedule."""

    def __init__(self, config: SessionConfig | None = None):
        """Initialize the session.

        Args:
            config: Session settings; a fresh seed is drawn when the config
                does not fix one
        """
        self.config = config or SessionConfig()
        self._seed = self.config.seed if self.config.seed is not None else generate_seed()
        self._stream = new_stream(self._seed)
        logger.debug(
            "session started: seed=%d sizes=[%d, %d)",
            self._seed,
            self.config.size_min,
            self.config.size_max,
        )

    @property
    def seed(self) -> int:
        """The seed the stream was created from (use it to replay a run)."""
        return self._seed

    @property
    def stream(self) -> RandomStream:
        return self._stream

    def sizes(self) -> Iterator[int]:
        """Yield the cycling size schedule forever."""
        return itertools.cycle(range(self.config.size_min, self.config.size_max))

    def run(self, generator: Any) -> Iterator[Any]:
        """Lazily yield values from ``generator``, one per scheduled size."""
        for size in self.sizes():
            yield generator.invoke(self._stream, size)

    def take(self, generator: Any, count: int | None = None) -> list[Any]:
        """Draw the first ``count`` values (``config.sample_count`` by default)."""
        count = self.config.sample_count if count is None else count
        return list(itertools.islice(self.run(generator), count))

    def generate(self, generator: Any, size: int | None = None) -> Any:
        """Invoke ``generator`` once against this session's stream."""
        size = self.config.default_size if size is None else size
        return generator.invoke(self._stream, size)
