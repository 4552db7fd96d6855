"""Tests for evaluation sessions."""

import itertools
import logging

from valuegen.config.base import SessionConfig
from valuegen.engine.session import Session
from valuegen.generators.combinators import choose, constant, sized
from valuegen.generators.scalars import string_ascii


class TestSession:
    """Tests for Session."""

    def test_fresh_seed_when_unset(self):
        session = Session()
        assert isinstance(session.seed, int)
        assert session.seed >= 0

    def test_fixed_seed(self):
        assert Session(SessionConfig(seed=77)).seed == 77

    def test_same_seed_same_values(self, seed):
        config = SessionConfig(seed=seed)
        assert Session(config).take(string_ascii, 50) == Session(config).take(string_ascii, 50)

    def test_replay_from_reported_seed(self):
        first = Session()
        values = first.take(choose(0, 2**40), 5)

        replay = Session(SessionConfig(seed=first.seed))
        assert replay.take(choose(0, 2**40), 5) == values

    def test_sizes_cycle(self):
        session = Session(SessionConfig(size_min=1, size_max=4, seed=1))
        assert list(itertools.islice(session.sizes(), 7)) == [1, 2, 3, 1, 2, 3, 1]

    def test_take_defaults_to_sample_count(self):
        session = Session(SessionConfig(sample_count=3, seed=1))
        assert session.take(constant("x")) == ["x", "x", "x"]

    def test_generate_uses_default_size(self):
        session = Session(SessionConfig(default_size=7, seed=1))
        assert session.generate(sized(constant)) == 7
        assert session.generate(sized(constant), 2) == 2

    def test_stream_continues_between_calls(self):
        session = Session(SessionConfig(seed=5))
        first = session.generate(choose(0, 2**40))
        second = session.generate(choose(0, 2**40))

        fresh = Session(SessionConfig(seed=5))
        assert fresh.take(choose(0, 2**40), 2)[0] == first
        assert first != second

    def test_logs_seed(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="valuegen.engine.session"):
            Session(SessionConfig(seed=31337))

        assert "seed=31337" in caplog.text
