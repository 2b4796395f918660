"""Classification result container for flagsift."""

from .types import FlagRegistry, PositionalList


class ClassificationResult:
    """Holds the positionals and resolved flag values of one parse."""

    def __init__(
        self,
        positionals: PositionalList,
        flags: FlagRegistry,
        flag_count: int = 0,
        escaped: bool = False,
    ):
        self.positionals = positionals
        self.flags = flags
        self.flag_count = flag_count
        self.escaped = escaped

    def __contains__(self, name):
        """Allow checking if a flag is registered using 'in' operator."""
        return name in self.flags

    def __getitem__(self, name):
        """Allow dictionary-style access to resolved flag values."""
        return self.flags[name]

    def __len__(self):
        return len(self.positionals)

    def __eq__(self, other):
        """Compare with another result, or with a plain list of positionals."""
        if isinstance(other, list):
            return self.positionals == other
        if isinstance(other, ClassificationResult):
            return (
                self.positionals == other.positionals
                and self.flags == other.flags
                and self.flag_count == other.flag_count
                and self.escaped == other.escaped
            )
        return NotImplemented

    def __repr__(self):
        return (
            f"ClassificationResult(positionals={self.positionals!r}, "
            f"flags={self.flags!r}, flag_count={self.flag_count}, "
            f"escaped={self.escaped})"
        )

    def get(self, name, default=None):
        """Allow .get() method access to flag values."""
        return self.flags.get(name, default)

    @property
    def token_count(self) -> int:
        """Number of input tokens accounted for by this result."""
        return len(self.positionals) + self.flag_count + (1 if self.escaped else 0)
