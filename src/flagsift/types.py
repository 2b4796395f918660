"""
Type aliases for flagsift.

Type Aliases:
    Token: A single raw command-line token
    TokenList: List of raw tokens, in invocation order
    FlagName: A token recognized as a flag identifier
    FlagRegistry: Mapping of recognized flag names to their boolean value
    PositionalList: Ordered list of positional tokens
    FlagTuple: A flag name and its optional value text
    ExitCode: Integer representing exit codes
"""

from typing import Dict, List, Optional, Tuple

Token = str
"""A raw command-line token, taken verbatim."""

TokenList = List[Token]
"""List of raw tokens (e.g., ['myexe', '-b', '--', '-a', '2'])."""

FlagName = str
"""Flag identifier including its leading dash (e.g., '-a' or '--verbose')."""

FlagRegistry = Dict[FlagName, bool]
"""Recognized flags mapped to their current value (e.g., {'-a': False})."""

PositionalList = List[Token]
"""Positional tokens in encountered order, duplicates retained."""

FlagTuple = Tuple[FlagName, Optional[str]]
"""A flag name and the text after '=' if any (e.g., ('-a', '0') or ('-b', None))."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""
