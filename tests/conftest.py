"""
Shared test fixtures and utilities for the formtree test suite.
"""

import pytest

from formtree import Element, Field, FieldType
from formtree.config import TreeConfig, reset_config, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test with a fresh strict configuration."""
    token = set_config(TreeConfig())
    yield
    reset_config(token)


@pytest.fixture
def lenient():
    """Switch the current test to lenient mode.

    Usage:
        def test_something(lenient):
            # mistakes degrade silently here
            pass
    """
    token = set_config(TreeConfig.lenient())
    yield
    reset_config(token)


@pytest.fixture
def address_form():
    """Object field with an anonymous group in between.

    Structure:
        person (object)
          name (string)
          <group>
            address (object)
              street (string)
              city (string)
    """
    person = Field(FieldType.OBJECT, "person")
    name = Field(FieldType.STRING, "name")
    group = Element()
    address = Field(FieldType.OBJECT, "address")
    address.add(Field(FieldType.STRING, "street"), Field(FieldType.STRING, "city"))
    group.add(address)
    person.add(name, group)
    return person
