"""
Property-based tests for TokenParser using Hypothesis.
"""

from __future__ import annotations

import pytest
from argmatch.core.common.exceptions import (
    DuplicateTokenError,
    MissingArgumentError,
    UnexpectedTokenError,
)
from argmatch.core.domain.argument_definition import ArgumentDefinition
from argmatch.core.services.token_parser import TokenParser
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

names = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=2, max_size=12
)
values = st.text(min_size=0, max_size=20).filter(lambda s: not s.startswith("-"))

# The autouse logging fixture runs once per test, not once per example
hypothesis_settings = settings(
    suppress_health_check=[HealthCheck.function_scoped_fixture], max_examples=50
)


@hypothesis_settings
@given(name=names)
def test_flag_maps_to_none(name: str) -> None:
    token_parser = TokenParser()
    token_parser.add(ArgumentDefinition.new().flag(name))

    assert token_parser.parse([f"--{name}"]) == {name: None}


@hypothesis_settings
@given(name=names, value=values)
def test_value_option_maps_to_following_token(name: str, value: str) -> None:
    token_parser = TokenParser()
    token_parser.add(ArgumentDefinition.new().input(name))

    assert token_parser.parse([f"--{name}", value]) == {name: value}


@hypothesis_settings
@given(name=names, value=values)
def test_repeated_option_is_duplicate(name: str, value: str) -> None:
    token_parser = TokenParser()
    token_parser.add(ArgumentDefinition.new().input(name))

    with pytest.raises(DuplicateTokenError):
        token_parser.parse([f"--{name}", value, f"--{name}", value])


@hypothesis_settings
@given(name=names)
def test_trailing_value_option_is_missing(name: str) -> None:
    token_parser = TokenParser()
    token_parser.add(ArgumentDefinition.new().input(name))

    with pytest.raises(MissingArgumentError):
        token_parser.parse([f"--{name}"])


@hypothesis_settings
@given(name=names, unknown=names)
def test_unregistered_long_option_is_unexpected(name: str, unknown: str) -> None:
    token_parser = TokenParser()
    token_parser.add(ArgumentDefinition.new().flag(name))

    if unknown == name:
        assert token_parser.parse([f"--{unknown}"]) == {name: None}
    else:
        with pytest.raises(UnexpectedTokenError):
            token_parser.parse([f"--{unknown}"])


@hypothesis_settings
@given(tokens=st.lists(values, min_size=0, max_size=6))
def test_positional_slots_fill_in_order(tokens: list[str]) -> None:
    token_parser = TokenParser()
    token_parser.add_all(
        ArgumentDefinition.new().param(f"p{i}") for i in range(len(tokens))
    )

    result = token_parser.parse(tokens)

    assert result == {f"p{i}": token for i, token in enumerate(tokens)}
    assert list(result) == [f"p{i}" for i in range(len(tokens))]
