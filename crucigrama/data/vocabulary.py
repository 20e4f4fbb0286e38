"""Vocabulary loading from a local JSON file or an HTTP endpoint."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

import requests

from ..core.exceptions import VocabularyLoadError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class RecordFields:
    """Column names of the raw vocabulary records."""

    location: str = "Lugar en el libro"
    word: str = "Unidad Léxica (Español)"
    translation: str = "Traducción (Inglés)"


@dataclass(frozen=True)
class VocabularyRecord:
    """The three fields the builder needs from a raw record."""

    location: str
    word: str
    translation: str = ""

    @classmethod
    def from_mapping(cls, raw: Dict[str, Any], fields: RecordFields) -> "VocabularyRecord":
        return cls(
            location=str(raw.get(fields.location) or ""),
            word=str(raw.get(fields.word) or ""),
            translation=str(raw.get(fields.translation) or ""),
        )


class Vocabulary:
    """An immutable, loaded collection of :class:`VocabularyRecord`."""

    def __init__(self, records: Iterable[VocabularyRecord], source: str = "<memory>") -> None:
        self._records: List[VocabularyRecord] = list(records)
        self.source = source

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VocabularyRecord]:
        return iter(self._records)

    @classmethod
    def from_records(
        cls,
        raw_records: Iterable[Dict[str, Any]],
        fields: Optional[RecordFields] = None,
        source: str = "<memory>",
    ) -> "Vocabulary":
        fields = fields or RecordFields()
        records = []
        for raw in raw_records:
            if not isinstance(raw, dict):
                raise VocabularyLoadError(f"Vocabulary entry is not an object: {raw!r}")
            records.append(VocabularyRecord.from_mapping(raw, fields))
        return cls(records, source=source)


class VocabularyLoader:
    """Resolve a path or ``http(s)`` URL into a :class:`Vocabulary`."""

    def __init__(
        self,
        fields: Optional[RecordFields] = None,
        timeout_seconds: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.fields = fields or RecordFields()
        self.timeout_seconds = timeout_seconds
        self._session = session

    def load(self, source: Path | str) -> Vocabulary:
        text = str(source)
        if text.startswith(("http://", "https://")):
            payload = self._fetch(text)
        else:
            payload = self._read(Path(source))

        if not isinstance(payload, list):
            raise VocabularyLoadError(f"Vocabulary at {text} must be a JSON list")
        vocabulary = Vocabulary.from_records(payload, self.fields, source=text)
        LOGGER.info("Loaded %s vocabulary records from %s", len(vocabulary), text)
        return vocabulary

    def _read(self, path: Path) -> Any:
        if not path.exists():
            raise VocabularyLoadError(f"Missing vocabulary file: {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise VocabularyLoadError(f"Unable to read {path}: {exc}") from exc

    def _fetch(self, url: str) -> Any:
        getter = self._session.get if self._session is not None else requests.get
        try:
            response = getter(url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise VocabularyLoadError(f"Vocabulary request failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise VocabularyLoadError(f"Vocabulary response is not JSON: {exc}") from exc
