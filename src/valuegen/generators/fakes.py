"""Faker-backed generators for realistic-looking test data.

Each value seeds a Faker instance from a single draw on the session stream,
so faked values are as reproducible as any other generator's. Faker
instances are kept per thread, so sessions running in separate threads
never reseed each other's instance.
"""

import threading
from typing import Any

from faker import Faker

from valuegen.errors import ContractViolation
from valuegen.generators.base import Generator
from valuegen.prng import RandomStream

FAKER_SEED_MAX = 2**32 - 1

_local = threading.local()


def _faker_for(locale: str | None) -> Faker:
    """The calling thread's Faker instance for ``locale``."""
    instances = getattr(_local, "instances", None)
    if instances is None:
        instances = _local.instances = {}
    if locale not in instances:
        instances[locale] = Faker(locale)
    return instances[locale]


def fake(provider: str, *args: Any, locale: str | None = None, **kwargs: Any) -> Generator:
    """Generator calling the Faker provider ``provider``.

    Args:
        provider: Faker provider method name (e.g. ``"name"``, ``"email"``)
        *args: Positional arguments for the provider
        locale: Optional Faker locale
        **kwargs: Keyword arguments for the provider

    Returns:
        A generator advancing the stream by exactly one draw per value

    Raises:
        ContractViolation: If the provider does not exist
    """
    try:
        method = getattr(_faker_for(locale), provider)
    except AttributeError as e:
        raise ContractViolation(f"Unknown Faker provider: {provider!r}") from e
    if not callable(method):
        raise ContractViolation(f"Faker attribute {provider!r} is not a provider")

    def run(stream: RandomStream, _size: int) -> Any:
        faker = _faker_for(locale)
        faker.seed_instance(stream.uniform_int(0, FAKER_SEED_MAX))
        return getattr(faker, provider)(*args, **kwargs)

    return Generator(run, name=f"fake:{provider}")


fake_name = fake("name").named("fake_name")
fake_email = fake("email").named("fake_email")
fake_address = fake("address").named("fake_address")
fake_company = fake("company").named("fake_company")
fake_sentence = fake("sentence").named("fake_sentence")
