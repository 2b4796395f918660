"""Flag and positional argument classification for flagsift."""

from typing import Optional

from .classification_result import ClassificationResult
from .types import FlagRegistry, FlagTuple, PositionalList, Token, TokenList

ESCAPE_MARKER = "--"
FLAG_INTRODUCER = "-"
ASSIGNMENT_SEPARATOR = "="

TRUE_VALUES = ("true", "1")
FALSE_VALUES = ("false", "0")


class ArgumentClassifier:
    """Separates raw invocation tokens into flags and positionals."""

    @staticmethod
    def is_flag_token(token: Token) -> bool:
        """Check whether a token is flag-shaped (leading dash, not '--')."""
        return token != ESCAPE_MARKER and token.startswith(FLAG_INTRODUCER)

    @staticmethod
    def split_flag(token: Token) -> FlagTuple:
        """
        Split a flag token into ``(name, value_text)``.

        Only the first '=' separates; *value_text* is ``None`` when the token
        carries no separator at all.
        """
        if ASSIGNMENT_SEPARATOR in token:
            name, value_text = token.split(ASSIGNMENT_SEPARATOR, 1)
            return name, value_text
        return token, None

    @staticmethod
    def resolve_flag_value(value_text: Optional[str]) -> Optional[bool]:
        """
        Resolve the text after '=' to a boolean.

        ``None`` (bare flag) means True. Unrecognized text resolves to
        ``None`` so the caller keeps the registered value.
        """
        if value_text is None:
            return True
        if value_text in TRUE_VALUES:
            return True
        if value_text in FALSE_VALUES:
            return False
        return None

    @staticmethod
    def apply_flag(token: Token, registry: Optional[FlagRegistry]) -> None:
        """Record a flag occurrence in the registry if the name is registered."""
        if registry is None:
            return

        name, value_text = ArgumentClassifier.split_flag(token)
        if name not in registry:
            return

        if value_text is None:
            registry[name] = True
            return

        value = ArgumentClassifier.resolve_flag_value(value_text)
        if value is not None:
            registry[name] = value

    @staticmethod
    def parse(
        tokens: TokenList, registry: Optional[FlagRegistry] = None
    ) -> ClassificationResult:
        """
        Classify tokens in a single left-to-right pass.

        * Before the first '--', tokens starting with '-' are flags. Flags
          known to *registry* are updated in place (last occurrence wins);
          unknown flags are dropped.
        * The first '--' is consumed and switches every remaining token to
          positional.
        * Everything else, including the empty string, is positional.
        """
        positionals: PositionalList = []
        flag_count = 0
        positional_only = False

        for token in tokens:
            if positional_only:
                positionals.append(token)
                continue

            if token == ESCAPE_MARKER:
                positional_only = True
                continue

            if ArgumentClassifier.is_flag_token(token):
                flag_count += 1
                ArgumentClassifier.apply_flag(token, registry)
                continue

            positionals.append(token)

        flags = dict(registry) if registry is not None else {}
        return ClassificationResult(positionals, flags, flag_count, positional_only)

    @staticmethod
    def classify(
        tokens: TokenList, registry: Optional[FlagRegistry] = None
    ) -> PositionalList:
        """Return the positional tokens, updating *registry* in place."""
        return ArgumentClassifier.parse(tokens, registry).positionals
