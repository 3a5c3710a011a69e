"""
SaveResult – what DocumentStore.save() hands back for every non-error
outcome, plus the human/LLM facing text for it.
"""
from __future__ import annotations

from dataclasses import dataclass

from .enums import SaveOutcome


@dataclass(frozen=True, slots=True)
class SaveResult:
    outcome: SaveOutcome
    path:    str               # always '/'-separated

    @property
    def written(self) -> bool:
        return self.outcome is not SaveOutcome.DECLINED

    def message(self) -> str:
        if self.outcome is SaveOutcome.CREATED:
            return f"Document saved to {self.path}."
        if self.outcome is SaveOutcome.OVERWRITTEN:
            return f"Document saved to {self.path} (existing file overwritten)."
        return (
            f"File {self.path} already exists and overwrite was not requested, "
            "so nothing was written. Pass overwrite: true to replace it, "
            "or choose a different fileName."
        )

    def __str__(self) -> str:
        return f"{self.outcome.name} {self.path}"
