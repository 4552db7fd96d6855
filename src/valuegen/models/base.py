"""Record models - declarative descriptions of record generators.

A model names the fields of a record and, for each field, the generator
producing its value. Field specs are either the name of a registered
generator or a single-key mapping naming a combinator:

    fields:
      id: uuid
      age: {choose: [18, 90]}
      tags: {array: string_alpha, min_size: 1, max_size: 4}
      role: {elements: [admin, staff, guest]}
      score: {frequency: [[fixnum, 3], [floating, 1]]}
      address: {record: {street: fake_address, zip: string_numeric}}
"""

from typing import Any, Callable

from pydantic import BaseModel, Field

from valuegen.config.base import DEFAULT_TRIES, SessionConfig
from valuegen.errors import ContractViolation, ModelError
from valuegen.generators.base import Generator
from valuegen.generators.builders import array, hash_map, record, set_of
from valuegen.generators.combinators import (
    choose,
    constant,
    elements,
    frequency,
    not_empty,
    one_of,
    resize,
)
from valuegen.generators.registry import GeneratorRegistry, get_global_generator_registry

SIZE_OPTIONS = ("min_size", "max_size")


class RecordModel(BaseModel):
    """A named record layout and the session settings to sample it with."""

    name: str = Field(..., description="Model name")
    description: str = Field(default="", description="Model description")
    fields: dict[str, Any] = Field(..., description="Field name to field spec")
    session: SessionConfig = Field(
        default_factory=SessionConfig,
        description="Session settings used when sampling this model",
    )

    def to_generator(self, registry: GeneratorRegistry | None = None) -> Generator[dict]:
        """Compile the model into a ``record`` generator.

        Args:
            registry: Registry resolving generator names (global by default)

        Returns:
            Generator of dicts keyed by the model's field names
        """
        compiler = FieldCompiler(
            registry or get_global_generator_registry(),
            tries=self.session.default_tries,
        )
        model = {
            field_name: compiler.compile(spec, f"fields.{field_name}")
            for field_name, spec in self.fields.items()
        }
        return record(model).named(self.name)


class FieldCompiler:
    """Turns field specs into generators, resolving names through a registry.

    ``tries`` bounds the predicate filters the compiler builds (``not_empty``).
    """

    def __init__(self, registry: GeneratorRegistry, tries: int = DEFAULT_TRIES):
        self.registry = registry
        self.tries = tries
        self._combinators: dict[str, Callable[[Any, dict[str, Any], str], Generator]] = {
            "array": self._array,
            "set_of": self._set_of,
            "choose": self._choose,
            "elements": self._elements,
            "constant": self._constant,
            "not_empty": self._not_empty,
            "one_of": self._one_of,
            "frequency": self._frequency,
            "record": self._record,
            "hash_map": self._hash_map,
            "resize": self._resize,
        }

    def compile(self, spec: Any, path: str) -> Generator:
        """Compile one field spec found at ``path`` in the document."""
        if isinstance(spec, str):
            generator = self.registry.get(spec)
            if generator is None:
                raise ModelError(f"Unknown generator {spec!r}", path)
            return generator

        if not isinstance(spec, dict):
            raise ModelError(
                f"Field spec must be a generator name or a mapping, got {type(spec).__name__}",
                path,
            )

        names = [key for key in spec if key in self._combinators]
        if len(names) != 1:
            raise ModelError(
                f"Field spec must name exactly one of: {', '.join(sorted(self._combinators))}",
                path,
            )
        name = names[0]
        options = {key: value for key, value in spec.items() if key != name}

        allowed = SIZE_OPTIONS if name in ("array", "set_of") else ()
        unknown = sorted(set(options) - set(allowed))
        if unknown:
            raise ModelError(f"Unexpected options for {name}: {', '.join(unknown)}", path)

        try:
            return self._combinators[name](spec[name], options, f"{path}.{name}")
        except ContractViolation as e:
            raise ModelError(str(e), path) from e

    def _array(self, arg: Any, options: dict[str, Any], path: str) -> Generator:
        return array(self.compile(arg, path), **options)

    def _set_of(self, arg: Any, options: dict[str, Any], path: str) -> Generator:
        return set_of(self.compile(arg, path), **options)

    def _choose(self, arg: Any, options: dict[str, Any], path: str) -> Generator:
        if not isinstance(arg, list) or len(arg) != 2:
            raise ModelError("choose takes a [lower, upper] pair", path)
        return choose(*arg)

    def _elements(self, arg: Any, options: dict[str, Any], path: str) -> Generator:
        if not isinstance(arg, list):
            raise ModelError("elements takes a list of values", path)
        return elements(arg)

    def _constant(self, arg: Any, options: dict[str, Any], path: str) -> Generator:
        return constant(arg)

    def _not_empty(self, arg: Any, options: dict[str, Any], path: str) -> Generator:
        return not_empty(self.compile(arg, path), self.tries)

    def _one_of(self, arg: Any, options: dict[str, Any], path: str) -> Generator:
        if not isinstance(arg, list):
            raise ModelError("one_of takes a list of field specs", path)
        return one_of(*(self.compile(item, f"{path}[{i}]") for i, item in enumerate(arg)))

    def _frequency(self, arg: Any, options: dict[str, Any], path: str) -> Generator:
        if not isinstance(arg, list):
            raise ModelError("frequency takes a list of [spec, weight] pairs", path)
        pairs = []
        for i, item in enumerate(arg):
            if not isinstance(item, list) or len(item) != 2:
                raise ModelError("frequency entries must be [spec, weight] pairs", f"{path}[{i}]")
            pairs.append((self.compile(item[0], f"{path}[{i}]"), item[1]))
        return frequency(pairs)

    def _record(self, arg: Any, options: dict[str, Any], path: str) -> Generator:
        if not isinstance(arg, dict):
            raise ModelError("record takes a mapping of field specs", path)
        return record({key: self.compile(value, f"{path}.{key}") for key, value in arg.items()})

    def _hash_map(self, arg: Any, options: dict[str, Any], path: str) -> Generator:
        if not isinstance(arg, list) or len(arg) != 2:
            raise ModelError("hash_map takes a [key spec, value spec] pair", path)
        return hash_map(self.compile(arg[0], f"{path}[0]"), self.compile(arg[1], f"{path}[1]"))

    def _resize(self, arg: Any, options: dict[str, Any], path: str) -> Generator:
        if not isinstance(arg, list) or len(arg) != 2:
            raise ModelError("resize takes a [spec, size] pair", path)
        return resize(self.compile(arg[0], f"{path}[0]"), arg[1])
