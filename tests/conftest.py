"""Shared fixtures for valuegen tests."""

import os

import pytest

from valuegen.utils.helpers import generate_seed

SEED_ENV = "VALUEGEN_SEED"


@pytest.fixture
def seed(request):
    """Seed for the test, taken from VALUEGEN_SEED or freshly drawn.

    The seed is reported when the test fails so the run can be replayed.
    """
    raw = os.environ.get(SEED_ENV)
    value = int(raw) if raw else generate_seed()
    request.node.user_properties.append(("seed", value))
    return value


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call" and report.failed:
        for name, value in item.user_properties:
            if name == "seed":
                report.sections.append(("valuegen", f"{SEED_ENV}={value}"))
