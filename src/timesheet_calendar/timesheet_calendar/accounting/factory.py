from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ClassificationPolicy
from ..core.exceptions import ValidationError
from .strategies.all_entries_strategy import AllEntriesStrategy
from .strategies.base import ClassificationStrategy
from .strategies.first_entry_strategy import FirstEntryStrategy


@dataclass
class ClassificationStrategyFactory:
    """Factory Pattern: choose the day classification strategy from settings."""

    def for_policy(self, policy: ClassificationPolicy | str) -> ClassificationStrategy:
        try:
            policy = ClassificationPolicy(policy)
        except ValueError:
            raise ValidationError(f"Unknown classification policy: {policy!r}")

        if policy is ClassificationPolicy.FIRST_ENTRY:
            return FirstEntryStrategy()
        return AllEntriesStrategy()
