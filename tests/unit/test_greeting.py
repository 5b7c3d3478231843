"""Tests unitarios de starter_lib.greeting."""

import pytest

from starter_lib.greeting import GreetingOptions, greet


@pytest.mark.unit
class TestGreet:
    def test_default_greeting(self) -> None:
        assert greet(GreetingOptions(name="Alice")) == "Hello, Alice!"

    def test_formal_greeting(self) -> None:
        assert greet(GreetingOptions(name="Dr. Smith", formal=True)) == "Good day, Dr. Smith."

    def test_custom_prefix(self) -> None:
        assert greet(GreetingOptions(name="Bob", prefix="Hey")) == "Hey, Bob!"

    def test_formal_ignores_prefix(self) -> None:
        options = GreetingOptions(name="Prof. Jones", formal=True, prefix="Hi")
        assert greet(options) == "Good day, Prof. Jones."

    def test_empty_name(self) -> None:
        assert greet(GreetingOptions(name="")) == "Hello, !"

    def test_name_not_trimmed(self) -> None:
        assert greet(GreetingOptions(name="  Eve ", prefix="")) == ",   Eve !"


@pytest.mark.unit
class TestGreetMapping:
    def test_mapping_defaults(self) -> None:
        assert greet({"name": "Alice"}) == "Hello, Alice!"

    def test_mapping_formal_overrides_prefix(self) -> None:
        assert greet({"name": "Prof. Jones", "formal": True, "prefix": "Hi"}) == "Good day, Prof. Jones."

    def test_mapping_none_takes_default(self) -> None:
        assert greet({"name": "Bob", "formal": None, "prefix": None}) == "Hello, Bob!"

    def test_mapping_without_name_raises(self) -> None:
        with pytest.raises(TypeError):
            greet({"prefix": "Hey"})
