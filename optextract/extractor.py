import dataclasses as dt
import logging

from enum import Enum
from typing import Optional

from . import const

_logger = logging.getLogger(__name__)

# --- Errors ----------------------------------------------------------------- #


class ExtractorError(RuntimeError):
    """
    Base class for malformed input. Carries the token that caused the failure.
    """

    template = "Malformed argument '{}'"

    token: str

    def __init__(self, token: str):
        super().__init__(self.template.format(token))
        self.token = token


class UnexpectedOperand(ExtractorError):
    """A plain value was found where the first option key was expected."""

    template = "Unexpected operand found '{}'"


class UnexpectedOption(ExtractorError):
    """An option key was found after parsing was implicitly disabled."""

    template = "Unexpected option found '{}'"


class AmbiguousOption(ExtractorError):
    """The same option key was used both as a flag and with a value."""

    template = "Ambiguous usage of option '{}'"


# --- Tokens ----------------------------------------------------------------- #


class TokenClass(Enum):
    DISABLE_MARKER = "disable marker"
    OPTION_KEY = "option key"
    PLAIN_VALUE = "plain value"


def isOptionKey(tok: str) -> bool:
    """
    Checks if the token introduces a named option.

    A token equal to one of the prefixes is never an option key, so neither
    "-" nor the disable marker "--" qualify.
    """
    return tok not in const.OPTION_PREFIXES and any(
        tok.startswith(prefix) for prefix in const.OPTION_PREFIXES
    )


def isDisableMarker(tok: str) -> bool:
    """Checks if the token turns off option parsing."""
    return tok == const.DISABLE_MARKER


def classify(tok: str) -> TokenClass:
    if isDisableMarker(tok):
        return TokenClass.DISABLE_MARKER
    if isOptionKey(tok):
        return TokenClass.OPTION_KEY
    return TokenClass.PLAIN_VALUE


# --- Model ------------------------------------------------------------------ #


class Kind(Enum):
    FLAG = "flag"
    VALUED = "valued"


@dt.dataclass
class Option:
    """
    An option seen during a single extraction run.

    Attributes:
        key: The option key, prefix included (e.g. "--name").
        kind: Whether the option was used as a flag or with values.
        values: The values in the order they were supplied.
    """

    key: str
    kind: Kind
    values: list[str] = dt.field(default_factory=list)


@dt.dataclass
class Result:
    """
    The outcome of a successful extraction.

    Attributes:
        extracted: Option keys mapped to their values, flags map to ["true"].
        trailing: Tokens left over once option parsing was disabled, in input order.
    """

    extracted: dict[str, list[str]] = dt.field(default_factory=dict)
    trailing: list[str] = dt.field(default_factory=list)


# --- State Machine ---------------------------------------------------------- #


class State(Enum):
    NOT_STARTED = "not started"
    PARSING = "parsing"
    IMPLICITLY_DISABLED = "implicitly disabled"
    EXPLICITLY_DISABLED = "explicitly disabled"
    FINISHED = "finished"


class Effect(Enum):
    NONE = "none"
    TRAIL = "trail"
    FLAG = "flag"
    VALUE = "value"


@dt.dataclass(frozen=True)
class Transition:
    """
    The outcome of a single step.

    Attributes:
        state: The state to move to.
        effect: What to record for the current token.
        consumed: How many tokens the step used up: 0 when the same token
            must be examined again in the new state, 2 when an option key
            took the following token as its value.
    """

    state: State
    effect: Effect
    consumed: int


def step(state: State, tok: str, lookahead: Optional[str] = None) -> Transition:
    """
    Computes the transition for `tok` in `state`.

    Args:
        state: The current state, anything but FINISHED.
        tok: The token under the cursor.
        lookahead: The token after it, or None at the end of input.

    Raises:
        UnexpectedOperand: `tok` is a plain value and parsing has not started.
        UnexpectedOption: `tok` is an option key after implicit disabling.
    """
    kind = classify(tok)

    match state:
        case State.NOT_STARTED:
            if kind == TokenClass.PLAIN_VALUE:
                raise UnexpectedOperand(tok)
            return Transition(State.PARSING, Effect.NONE, 0)

        case State.PARSING:
            if kind == TokenClass.DISABLE_MARKER:
                return Transition(State.EXPLICITLY_DISABLED, Effect.NONE, 1)
            if kind == TokenClass.PLAIN_VALUE:
                return Transition(State.IMPLICITLY_DISABLED, Effect.NONE, 0)
            if lookahead is None or classify(lookahead) != TokenClass.PLAIN_VALUE:
                return Transition(State.PARSING, Effect.FLAG, 1)
            return Transition(State.PARSING, Effect.VALUE, 2)

        case State.IMPLICITLY_DISABLED:
            if kind == TokenClass.DISABLE_MARKER:
                return Transition(State.EXPLICITLY_DISABLED, Effect.NONE, 1)
            if kind == TokenClass.OPTION_KEY:
                raise UnexpectedOption(tok)
            return Transition(State.IMPLICITLY_DISABLED, Effect.TRAIL, 1)

        case State.EXPLICITLY_DISABLED:
            return Transition(State.EXPLICITLY_DISABLED, Effect.TRAIL, 1)

        case _:
            raise ValueError(f"No transition out of state '{state.value}'")


def _record(options: dict[str, Option], key: str, kind: Kind, value: str):
    """Records one use of `key`, rejecting a change of kind."""
    option = options.get(key)
    if option is None:
        options[key] = Option(key, kind, [value])
        return

    if option.kind != kind:
        raise AmbiguousOption(key)

    if kind == Kind.FLAG:
        option.values = [value]
    else:
        option.values.append(value)


def extract(tokens: list[str]) -> Result:
    """
    Classifies `tokens` into options and trailing operands.

    Args:
        tokens: The arguments, without the program name.

    Returns:
        The extracted options and trailing tokens.

    Raises:
        ExtractorError: On the first malformed construct in `tokens`.
    """
    options: dict[str, Option] = {}
    trailing: list[str] = []

    state = State.NOT_STARTED
    cursor = 0
    while cursor < len(tokens):
        tok = tokens[cursor]
        lookahead = tokens[cursor + 1] if cursor + 1 < len(tokens) else None

        transition = step(state, tok, lookahead)
        _logger.debug(
            f"{state.value} --[{tok!r}]--> {transition.state.value} ({transition.effect.value})"
        )

        match transition.effect:
            case Effect.FLAG:
                _record(options, tok, Kind.FLAG, const.FLAG_VALUE)
            case Effect.VALUE:
                _record(options, tok, Kind.VALUED, tokens[cursor + 1])
            case Effect.TRAIL:
                trailing.append(tok)
            case Effect.NONE:
                pass

        state = transition.state
        cursor += transition.consumed

    state = State.FINISHED
    _logger.debug(f"{state.value} after {len(tokens)} token(s)")

    return Result(
        {option.key: list(option.values) for option in options.values()},
        trailing,
    )
