from dataclasses import dataclass, field


@dataclass(frozen=True)
class Conflict:
    """One contradiction between two documents."""

    document1: str
    document2: str
    description: str
    suggestion: str


@dataclass(frozen=True)
class ConflictReport:
    """Ordered conflicts produced by one pipeline run."""

    conflicts: list[Conflict] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)
