import pytest
from argmatch.core.domain.argument_definition import ArgumentDefinition
from argmatch.core.services.token_parser import TokenParser


@pytest.fixture
def standard_definitions() -> list[ArgumentDefinition]:
    """Two value options, a flag and two positional parameters."""
    return [
        ArgumentDefinition.new().input("default"),
        ArgumentDefinition.new().input("short").short("s"),
        ArgumentDefinition.new().flag("flag").short("f"),
        ArgumentDefinition.new().param("file"),
        ArgumentDefinition.new().param("path"),
    ]


@pytest.fixture
def options_only_definitions() -> list[ArgumentDefinition]:
    return [
        ArgumentDefinition.new().input("default"),
        ArgumentDefinition.new().input("short").short("s"),
        ArgumentDefinition.new().flag("flag").short("f"),
    ]


@pytest.fixture
def parser(standard_definitions: list[ArgumentDefinition]) -> TokenParser:
    token_parser = TokenParser()
    token_parser.add_all(standard_definitions)
    return token_parser


@pytest.fixture
def options_parser(options_only_definitions: list[ArgumentDefinition]) -> TokenParser:
    token_parser = TokenParser()
    token_parser.add_all(options_only_definitions)
    return token_parser
