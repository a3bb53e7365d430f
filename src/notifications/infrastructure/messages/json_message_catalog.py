"""JSON-file-backed message catalog overrides.

The file holds a single object mapping rule names to templates::

    {"min_length": "'{0}' needs at least {1} characters"}

Rules not named in the file keep their default template.
"""

from __future__ import annotations

import json
from pathlib import Path

from notifications.domain.exceptions import CatalogFileError
from notifications.domain.model.messages import DEFAULT_MESSAGES, MessageCatalog


class JsonMessageCatalog:

    def __init__(self, file_path: Path, base: MessageCatalog = DEFAULT_MESSAGES) -> None:
        self._file_path = file_path
        self._base = base

    def load(self) -> MessageCatalog:
        """Return the base catalog with the file's templates applied."""
        return self._base.with_overrides(self._read())

    # --- Serialization helpers ------------------------------------------------

    def _read(self) -> dict[str, str]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise CatalogFileError(
                f"Message catalog not found: {self._file_path}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise CatalogFileError(
                f"Message catalog {self._file_path} is not valid JSON: {exc.msg}"
            ) from exc

        if not isinstance(raw, dict):
            raise CatalogFileError(
                f"Message catalog {self._file_path} must be a JSON object, "
                f"got {type(raw).__name__}"
            )
        bad = sorted(rule for rule, template in raw.items() if not isinstance(template, str))
        if bad:
            raise CatalogFileError(
                f"Templates must be strings in {self._file_path}: {', '.join(bad)}"
            )
        return raw
