"""Generator Registry for looking up generators by name."""

import logging
from typing import Iterator

from valuegen.errors import ContractViolation
from valuegen.generators.base import Generator, is_generator

logger = logging.getLogger(__name__)

DEFAULT_GENERATORS = (
    "fixnum",
    "natural",
    "fixnum_pos",
    "fixnum_neg",
    "floating",
    "rational",
    "boolean",
    "char",
    "char_ascii",
    "char_alphanumeric",
    "char_alpha",
    "char_numeric",
    "string",
    "string_ascii",
    "string_alphanumeric",
    "string_alpha",
    "string_numeric",
    "symbol",
    "byte_list",
    "byte_string",
    "uuid",
    "simple_type",
    "simple_printable",
)

DEFAULT_FAKES = (
    "fake_name",
    "fake_email",
    "fake_address",
    "fake_company",
    "fake_sentence",
)


class GeneratorRegistry:
    """Registry of named generators.

    Used by model documents and the CLI to refer to generators by name.
    """

    def __init__(self, register_defaults: bool = True):
        self._generators: dict[str, Generator] = {}
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register the built-in zero-argument generators."""
        from valuegen.generators import fakes, scalars

        for name in DEFAULT_GENERATORS:
            self.register(name, getattr(scalars, name))
        for name in DEFAULT_FAKES:
            self.register(name, getattr(fakes, name))

    def register(self, name: str, generator: Generator) -> None:
        """Register a generator under ``name``.

        Args:
            name: Lookup name (replaces any existing entry)
            generator: The generator to register
        """
        if not is_generator(generator):
            raise ContractViolation(
                f"Only generators can be registered, got {type(generator).__name__} for {name!r}"
            )
        if name in self._generators:
            logger.debug("replacing registered generator %r", name)
        self._generators[name] = generator

    def get(self, name: str) -> Generator | None:
        """Get a generator by name, or None if not registered."""
        return self._generators.get(name)

    def list_names(self) -> list[str]:
        """List all registered names in registration order."""
        return list(self._generators.keys())

    def unregister(self, name: str) -> bool:
        """Remove a generator from the registry.

        Returns:
            True if removed, False if not found
        """
        if name in self._generators:
            del self._generators[name]
            return True
        return False

    def __contains__(self, name: str) -> bool:
        return name in self._generators

    def __len__(self) -> int:
        return len(self._generators)

    def __iter__(self) -> Iterator[str]:
        return iter(self._generators)


_global_registry: GeneratorRegistry | None = None


def get_global_generator_registry() -> GeneratorRegistry:
    """Get the global generator registry singleton."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
    return _global_registry
