"""Tests for record models."""

import itertools

import pytest

from valuegen.config.base import SessionConfig
from valuegen.errors import ModelError, SuchThatExhausted
from valuegen.generators.combinators import constant
from valuegen.generators.registry import GeneratorRegistry
from valuegen.models.base import FieldCompiler, RecordModel
from valuegen.models.loader import ModelLoader, load_model

USER_MODEL = """
name: user
description: A user account
session:
  seed: 42
  sample_count: 5
fields:
  id: uuid
  name: fake_name
  age: {choose: [18, 90]}
  role: {elements: [admin, staff, guest]}
  tags: {array: string_alpha, min_size: 1, max_size: 4}
  nickname: {not_empty: string_alphanumeric}
  score: {frequency: [[fixnum, 3], [floating, 1]]}
  kind: {constant: person}
  labels: {set_of: char_alpha, max_size: 3}
  extra: {one_of: [boolean, {constant: null}]}
  counters: {hash_map: [symbol, natural]}
  fixed: {resize: [string_numeric, 5]}
  address:
    record:
      street: fake_address
      zip: string_numeric
"""


@pytest.fixture
def user_model():
    return ModelLoader().load_from_string(USER_MODEL)


class TestModelLoader:
    """Tests for ModelLoader."""

    def test_load_from_string(self, user_model):
        assert user_model.name == "user"
        assert user_model.description == "A user account"
        assert user_model.session.seed == 42
        assert user_model.session.sample_count == 5
        assert "address" in user_model.fields

    def test_session_defaults(self):
        model = ModelLoader().load_from_string("name: m\nfields:\n  id: uuid\n")
        assert model.session == SessionConfig()

    def test_load_file(self, tmp_path):
        path = tmp_path / "user.yaml"
        path.write_text(USER_MODEL)

        assert load_model(path).name == "user"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_model(tmp_path / "missing.yaml")

    @pytest.mark.parametrize("content,path", [
        ("fields:\n  id: uuid\n", ""),
        ("name: m\n", ""),
        ("name: m\nfields: {}\n", "fields"),
        ("name: m\nfields:\n  id: 3\n", "fields.id"),
        ("name: m\nfields:\n  id: uuid\nsession:\n  seed: x\n", "session.seed"),
        ("name: m\nfields:\n  id: uuid\nunexpected: 1\n", ""),
    ])
    def test_schema_errors(self, content, path):
        with pytest.raises(ModelError) as exc_info:
            ModelLoader().load_from_string(content)

        assert exc_info.value.path == path

    def test_invalid_session(self):
        content = "name: m\nfields:\n  id: uuid\nsession:\n  size_min: 10\n  size_max: 5\n"
        with pytest.raises(ModelError) as exc_info:
            ModelLoader().load_from_string(content)

        assert exc_info.value.path == "session"

    @pytest.mark.parametrize("field,path", [
        ("{choose: [a, 3]}", "fields.a"),
        ("{array: fixnum, min_size: x, max_size: 3}", "fields.a"),
        ("{record: {inner: {set_of: char, max_size: -1}}}", "fields.a.record.inner"),
    ])
    def test_bad_bounds_become_model_errors(self, field, path):
        model = ModelLoader().load_from_string(f"name: m\nfields:\n  a: {field}\n")

        with pytest.raises(ModelError) as exc_info:
            model.to_generator()

        assert exc_info.value.path == path


class TestRecordModel:
    """Tests for compiling models into generators."""

    def test_generates_records(self, user_model):
        gen = user_model.to_generator()
        records = list(itertools.islice(gen.stream(user_model.session), 50))

        for rec in records:
            assert list(rec) == list(user_model.fields)
            assert len(rec["id"]) == 36
            assert isinstance(rec["name"], str)
            assert 18 <= rec["age"] <= 90
            assert rec["role"] in ("admin", "staff", "guest")
            assert 1 <= len(rec["tags"]) <= 4
            assert rec["nickname"]
            assert isinstance(rec["score"], (int, float))
            assert rec["kind"] == "person"
            assert isinstance(rec["labels"], set) and len(rec["labels"]) <= 3
            assert rec["extra"] in (True, False, None)
            assert isinstance(rec["counters"], dict)
            assert len(rec["fixed"]) <= 5
            assert set(rec["address"]) == {"street", "zip"}

    def test_reproducible(self, user_model):
        gen = user_model.to_generator()
        assert gen.gen(seed=8) == gen.gen(seed=8)

    def test_generator_named_after_model(self, user_model):
        assert user_model.to_generator().name == "user"

    def test_custom_registry(self):
        registry = GeneratorRegistry(register_defaults=False)
        registry.register("answer", constant(42))
        model = RecordModel(name="m", fields={"a": "answer", "b": {"array": "answer", "max_size": 2}})

        value = model.to_generator(registry).gen(seed=1)
        assert value["a"] == 42
        assert set(value["b"]) <= {42}

    def test_session_tries_bound_not_empty(self):
        registry = GeneratorRegistry(register_defaults=False)
        registry.register("blank", constant(""))
        model = RecordModel(
            name="m",
            fields={"a": {"not_empty": "blank"}},
            session=SessionConfig(default_tries=2),
        )

        with pytest.raises(SuchThatExhausted) as exc_info:
            model.to_generator(registry).gen(seed=1)

        assert exc_info.value.tries == 2


class TestFieldCompiler:
    """Tests for field spec errors."""

    @pytest.fixture
    def compiler(self):
        return FieldCompiler(GeneratorRegistry())

    @pytest.mark.parametrize("spec,message", [
        ("nope", "Unknown generator"),
        (3, "generator name or a mapping"),
        ({"array": "uuid", "one_of": ["uuid"]}, "exactly one"),
        ({"min_size": 1}, "exactly one"),
        ({"choose": [1, 2], "max_size": 3}, "Unexpected options"),
        ({"choose": [1]}, "lower, upper"),
        ({"choose": [9, 1]}, "greater than or equal"),
        ({"elements": []}, "non-empty"),
        ({"elements": "abc"}, "list of values"),
        ({"frequency": [["uuid", 0]]}, "positive integers"),
        ({"frequency": ["uuid"]}, "pairs"),
        ({"record": ["uuid"]}, "mapping"),
        ({"hash_map": ["uuid"]}, "pair"),
        ({"resize": ["uuid", -1]}, "non-negative"),
        ({"one_of": "uuid"}, "list of field specs"),
    ])
    def test_errors(self, compiler, spec, message):
        with pytest.raises(ModelError, match=message):
            compiler.compile(spec, "fields.x")

    def test_nested_error_path(self, compiler):
        with pytest.raises(ModelError) as exc_info:
            compiler.compile({"record": {"inner": {"array": "nope"}}}, "fields.x")

        assert exc_info.value.path == "fields.x.record.inner.array"
