#!/usr/bin/env python3
"""
Demo script showing basic usage of valuegen.

Run this script after installing the package:
    pip install -e .
    python demo.py
"""

import itertools

from valuegen import (
    Session,
    SessionConfig,
    SuchThatExhausted,
    array,
    bind,
    choose,
    elements,
    fake_email,
    fake_name,
    fixnum,
    fmap,
    frequency,
    natural,
    not_empty,
    record,
    string_alpha,
    string_ascii,
    string_numeric,
    such_that,
    uuid,
)
from valuegen.models.loader import ModelLoader


def demo_scalars():
    """Demonstrate the scalar generators and the size bound."""
    print("=" * 60)
    print("1. SCALARS AND SIZE")
    print("=" * 60)

    print(f"fixnum, size 5:     {fixnum.sample(8, seed=42)}")
    print(f"string_alpha, 10:   {string_alpha.gen(size=10, seed=42)!r}")
    print(f"uuid:               {uuid.gen(seed=42)}")
    print(f"choose(1, 6) x 5:   {list(itertools.islice(choose(1, 6).to_enum(seed=7), 5))}")
    print()


def demo_combinators():
    """Demonstrate building generators out of other generators."""
    print("=" * 60)
    print("2. COMBINATORS")
    print("=" * 60)

    evens = fmap(natural, lambda n: n * 2)
    print(f"evens:              {evens.sample(6, seed=1)}")

    no_a = such_that(string_ascii, lambda s: "a" not in s)
    print(f"no 'a' strings:     {no_a.sample(3, seed=1)}")

    numbered = bind(natural, lambda n: array(string_numeric, max_size=n))
    print(f"bind natural/array: {numbered.gen(size=4, seed=3)}")

    weighted = frequency({uuid: 3, string_ascii: 1})
    print(f"frequency:          {weighted.gen(size=5, seed=9)!r}")

    impossible = such_that(natural, lambda n: n < 0, tries=3)
    try:
        impossible.gen(seed=1)
    except SuchThatExhausted as e:
        print(f"such_that gave up:  {e}")
    print()


def demo_records():
    """Demonstrate records and a session with a custom size schedule."""
    print("=" * 60)
    print("3. RECORDS AND SESSIONS")
    print("=" * 60)

    user = record({
        "id": uuid,
        "name": fake_name,
        "email": fake_email,
        "role": elements(["admin", "staff", "guest"]),
        "tags": array(not_empty(string_alpha), max_size=3),
    })

    session = Session(SessionConfig(seed=12345, size_min=2, size_max=6))
    for i, value in enumerate(session.take(user, 3)):
        print(f"Record {i + 1}: {value}")
    print(f"Seed: {session.seed}")
    print()


def demo_model_document():
    """Demonstrate generating records from a YAML model document."""
    print("=" * 60)
    print("4. MODEL DOCUMENTS")
    print("=" * 60)

    model = ModelLoader().load_from_string(
        """
name: order
fields:
  id: uuid
  customer: fake_name
  quantity: {choose: [1, 20]}
  items: {array: string_alpha, min_size: 1, max_size: 3}
session:
  seed: 2024
  sample_count: 3
"""
    )

    session = Session(model.session)
    for value in session.take(model.to_generator()):
        print(f"  {value}")
    print()


def main():
    """Run all demos."""
    print()
    print("VALUEGEN DEMO")
    print("=" * 60)
    print()

    demo_scalars()
    demo_combinators()
    demo_records()
    demo_model_document()

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print()
    print("To use the CLI, install the package and run:")
    print("  pip install -e .")
    print("  valuegen --help")
    print()


if __name__ == "__main__":
    main()
