"""
DocumentStore
=============

Writes documents to   <root>/<category>/<fileName>   with explicit
overwrite semantics:

    target missing                 → write, CREATED
    target exists, overwrite=True  → write, OVERWRITTEN
    target exists, overwrite=False → leave untouched, DECLINED

Layer:  core.services

No locking: two concurrent saves to one path end with whichever write
landed last. No retries either; re-invoke with overwrite=True or another
fileName.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Tuple

from docwright.core.exceptions          import DocumentWriteError, ValidationError
from docwright.core.models.enums        import Category, SaveOutcome
from docwright.core.models.save_request import EXPECTED_SAVE_SHAPE, SaveRequest
from docwright.core.models.save_result  import SaveResult

log = logging.getLogger(__name__)

DEFAULT_CATEGORIES: Tuple[str, ...] = tuple(c.value for c in Category)


class DocumentStore:

    def __init__(
        self,
        root: str | Path,
        *,
        categories: Iterable[str] = DEFAULT_CATEGORIES,
        fallback_category: str = Category.OUTPUT.value,
    ) -> None:
        self.root = Path(root)
        self.categories = tuple(categories)
        if fallback_category not in self.categories:
            raise ValueError(f"fallback category {fallback_category!r} not in {self.categories}")
        self.fallback_category = fallback_category

    # ════════════════════════════════════════════════════════════════════
    #                         PUBLIC  API
    # ════════════════════════════════════════════════════════════════════
    def save(self, request: SaveRequest) -> SaveResult:
        category = self.resolve_category(request.category)
        self._validate(request)

        folder = self._folder(category)
        target = self._target(folder, request.file_name)
        shown  = target.as_posix()

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            log.error("Could not create %s: %s", target.parent, exc)
            raise DocumentWriteError(f"could not create directory {target.parent.as_posix()}", exc) from exc

        try:
            existed = target.exists()
        except OSError as exc:
            log.error("Could not check %s: %s", shown, exc)
            raise DocumentWriteError(f"could not check {shown}", exc) from exc
        if existed and not request.overwrite:
            log.warning("%s exists and overwrite is off – declined", shown)
            return SaveResult(SaveOutcome.DECLINED, shown)

        try:
            with open(target, "w", encoding="utf-8", newline="") as fp:
                fp.write(request.content)
        except OSError as exc:
            log.error("Could not write %s: %s", shown, exc)
            raise DocumentWriteError(f"could not write {shown}", exc) from exc

        outcome = SaveOutcome.OVERWRITTEN if existed else SaveOutcome.CREATED
        log.info("%s %s (%d chars)", outcome.name.lower(), shown, len(request.content))
        return SaveResult(outcome, shown)

    def resolve_category(self, category: str | None) -> str:
        value = str(getattr(category, "value", category) or "")
        if value in self.categories:
            return value
        log.warning("Unknown category %r – using %r", category, self.fallback_category)
        return self.fallback_category

    def path_for(self, category: str, file_name: str) -> str:
        """Display path a save would use, without touching the disk."""
        folder = self._folder(self.resolve_category(category))
        return self._target(folder, file_name).as_posix()

    # ---------------------------------------------------------------- helpers
    def _folder(self, category: str) -> Path:
        return self.root / category

    @staticmethod
    def _validate(request: SaveRequest) -> None:
        if not request.file_name or not request.file_name.strip():
            raise ValidationError(
                "fileName must not be empty",
                remediation=f"Expected input of the form:\n{EXPECTED_SAVE_SHAPE}",
            )
        if not request.content or not request.content.strip():
            log.error("Refusing to save %s: content is empty", request.file_name)
            raise ValidationError(
                "content must not be empty",
                remediation=f"Expected input of the form:\n{EXPECTED_SAVE_SHAPE}",
            )

    @staticmethod
    def _target(folder: Path, file_name: str) -> Path:
        if any(ord(ch) < 32 or ord(ch) == 127 for ch in file_name):
            raise ValidationError(f"fileName {file_name!r} contains control characters")
        name = Path(file_name.strip())
        if name.is_absolute() or ".." in name.parts:
            raise ValidationError(
                f"fileName {file_name!r} must be a relative name inside the category folder"
            )
        return folder / name

    def __repr__(self) -> str:  # pragma: no cover
        return f"<DocumentStore {self.root.as_posix()} {self.categories}>"
