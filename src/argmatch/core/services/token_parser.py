"""
Single-pass matching of command-line tokens against argument definitions.

Rules applied to each token, left to right:

- ``--name`` selects the definition with exactly that name.
- ``-c`` (two characters) selects the definition with short alias ``c``.
- A value option must be followed directly by a non-dash token, which
  becomes its value; any other option in between is rejected.
- A bare token with no option awaiting a value fills the first positional
  parameter that has not been filled yet, in registration order.

When the tokens run out, a value option still awaiting its value and any
unfilled positional parameter are both reported as missing.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from argmatch.core.common.exceptions import (
    DuplicateDefinitionError,
    DuplicateTokenError,
    InvalidCommandError,
    MissingArgumentError,
    UnexpectedTokenError,
)
from argmatch.core.common.logging_utils import configure_logging, get_logger
from argmatch.core.config.parser_config import ParserConfig
from argmatch.core.domain.argument_definition import (
    LONG_PREFIX,
    SHORT_PREFIX,
    ArgumentDefinition,
)
from argmatch.core.interfaces.model_bases import InternalDTO
from argmatch.core.interfaces.token_parser_interface import ITokenParser, ParseResult

logger = get_logger(__name__)


@dataclass
class _ParseState(InternalDTO):
    """Mutable bookkeeping owned by a single ``parse`` call."""

    definitions: list[ArgumentDefinition]
    output: ParseResult = field(default_factory=dict)
    pending: ArgumentDefinition | None = None

    def store(self, name: str, value: str | None, token: str) -> None:
        if name in self.output:
            raise DuplicateTokenError(token, details={"argument": name})
        self.output[name] = value


class TokenParser(ITokenParser):
    """Parser engine holding an ordered list of argument definitions.

    The engine keeps no per-parse state: every ``parse`` call works on its own
    copy of the definitions, so one instance can serve any number of
    sequential or concurrent parses.
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config or ParserConfig()
        configure_logging(self._config)
        self._definitions: list[ArgumentDefinition] = []
        self._lock = threading.Lock()

    @property
    def config(self) -> ParserConfig:
        return self._config

    def add(self, definition: ArgumentDefinition) -> None:
        self.add_all([definition])

    def add_all(self, definitions: Iterable[ArgumentDefinition]) -> None:
        batch = list(definitions)
        with self._lock:
            self._validate_batch(batch)
            self._definitions.extend(batch)
            total = len(self._definitions)
        for definition in batch:
            logger.debug(
                "Registered argument",
                name=definition.name,
                kind=definition.kind.value if definition.kind else None,
                short=definition.short_alias,
                total=total,
            )

    def count(self) -> int:
        with self._lock:
            return len(self._definitions)

    def __len__(self) -> int:
        return self.count()

    def definitions(self) -> tuple[ArgumentDefinition, ...]:
        with self._lock:
            return tuple(self._definitions)

    def _validate_batch(self, batch: list[ArgumentDefinition]) -> None:
        """Reject repeated names or aliases before anything is appended."""
        names = {d.name for d in self._definitions if d.name}
        aliases = {d.short_alias for d in self._definitions if d.short_alias}

        for definition in batch:
            if definition.name and definition.name in names:
                if self._config.reject_duplicate_names:
                    logger.warning(
                        "Rejected duplicate argument name", name=definition.name
                    )
                    raise DuplicateDefinitionError(definition.name)
            if definition.short_alias and definition.short_alias in aliases:
                if self._config.reject_duplicate_aliases:
                    logger.warning(
                        "Rejected duplicate short alias",
                        name=definition.name,
                        short=definition.short_alias,
                    )
                    raise DuplicateDefinitionError(
                        definition.name,
                        message=(
                            f"Short alias '-{definition.short_alias}' of argument "
                            f"'{definition.name}' is already registered"
                        ),
                        details={"short_alias": definition.short_alias},
                    )
            if definition.name:
                names.add(definition.name)
            if definition.short_alias:
                aliases.add(definition.short_alias)

    def parse(self, tokens: Iterable[str]) -> ParseResult:
        state = _ParseState(
            definitions=[
                d.model_copy(update={"consumed": False}) if d.consumed else d
                for d in self.definitions()
            ]
        )

        try:
            for token in tokens:
                if token.startswith(SHORT_PREFIX):
                    self._consume_option(state, token)
                else:
                    self._consume_value(state, token)

            if state.pending is not None:
                raise MissingArgumentError(
                    state.pending.name, details={"awaiting_value": True}
                )

            for definition in state.definitions:
                if definition.is_positional and not definition.consumed:
                    raise MissingArgumentError(
                        definition.name, details={"positional": True}
                    )
        except InvalidCommandError as e:
            logger.debug("Parse failed", reason=e.reason.value, error=e.message)
            raise

        logger.debug("Parse succeeded", matched=len(state.output))
        return state.output

    def _consume_option(self, state: _ParseState, token: str) -> None:
        """Handle a dash-prefixed token."""
        if state.pending is not None:
            raise UnexpectedTokenError(
                token, details={"awaiting_value_for": state.pending.name}
            )

        if token.startswith(LONG_PREFIX):
            definition = self._find(state, lambda d: d.matches_long(token))
        else:
            definition = self._find(state, lambda d: d.matches_short(token))

        if definition is None:
            raise UnexpectedTokenError(token)

        if definition.expects_value:
            state.pending = definition
        else:
            state.store(definition.name, None, token)

    def _consume_value(self, state: _ParseState, token: str) -> None:
        """Handle a bare token: an option value or a positional parameter."""
        if state.pending is not None:
            name = state.pending.name
            state.pending = None
            state.store(name, token, token)
            return

        for index, definition in enumerate(state.definitions):
            if definition.is_positional and not definition.consumed:
                state.store(definition.name, token, token)
                state.definitions[index] = definition.mark_consumed()
                return

        raise UnexpectedTokenError(token)

    @staticmethod
    def _find(
        state: _ParseState, predicate: Callable[[ArgumentDefinition], bool]
    ) -> ArgumentDefinition | None:
        # First match in registration order wins
        for definition in state.definitions:
            if predicate(definition):
                return definition
        return None
