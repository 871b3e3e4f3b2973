# File: vocabstack_app/modules/vocabulary/services/content_loader.py
# MỤC ĐÍCH: Đọc dữ liệu từ vựng {topics, entries} từ file JSON hoặc URL.

import json
import logging
from typing import Any, Dict, List

import requests

from vocabstack_app.core.error_handlers import ContentLoadError

from ..schemas import MIXED_LEVEL, EntryDTO, ExampleDTO, TopicDTO, VocabularyPayload

logger = logging.getLogger(__name__)

REQUIRED_ENTRY_FIELDS = ('id', 'word', 'meaningVi', 'topicId', 'level')


def _optional_str(value) -> Any:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_topic(raw: Dict[str, Any]) -> TopicDTO:
    if not isinstance(raw, dict) or 'id' not in raw:
        raise ContentLoadError("Topic without an id")
    return TopicDTO(
        id=str(raw['id']),
        name=str(raw.get('name') or raw['id']),
        level=str(raw.get('level') or MIXED_LEVEL),
    )


def parse_entry(raw: Dict[str, Any]) -> EntryDTO:
    if not isinstance(raw, dict):
        raise ContentLoadError("Entry is not an object")
    missing = [name for name in REQUIRED_ENTRY_FIELDS if raw.get(name) in (None, '')]
    if missing:
        raise ContentLoadError(
            "Entry %s is missing %s" % (raw.get('id', '?'), ', '.join(missing))
        )

    examples: List[ExampleDTO] = []
    raw_examples = raw.get('examples')
    for ex in raw_examples if isinstance(raw_examples, list) else []:
        if isinstance(ex, dict):
            examples.append(ExampleDTO(en=str(ex.get('en', '')), vi=str(ex.get('vi', ''))))

    return EntryDTO(
        id=str(raw['id']),
        word=str(raw['word']),
        meaning_vi=str(raw['meaningVi']),
        topic_id=str(raw['topicId']),
        level=str(raw['level']),
        phonetic=_optional_str(raw.get('phonetic')),
        pos=_optional_str(raw.get('pos')),
        examples=tuple(examples),
    )


def parse_payload(data: Any) -> VocabularyPayload:
    """Turn the decoded JSON document into DTOs, rejecting malformed shapes."""
    if not isinstance(data, dict):
        raise ContentLoadError("Vocabulary document must be an object")
    topics = data.get('topics', [])
    entries = data.get('entries', [])
    if not isinstance(topics, list) or not isinstance(entries, list):
        raise ContentLoadError("'topics' and 'entries' must be lists")

    return VocabularyPayload(
        topics=[parse_topic(t) for t in topics],
        entries=[parse_entry(e) for e in entries],
    )


class JsonFileContentLoader:
    """Load vocabulary from a JSON file on disk."""

    def __init__(self, path: str):
        self.path = path

    def fetch_vocabulary(self) -> VocabularyPayload:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise ContentLoadError(f"Failed to load vocab: {exc}", source=self.path) from exc
        payload = parse_payload(data)
        logger.debug("Read %d entries from %s", len(payload.entries), self.path)
        return payload


class HttpContentLoader:
    """Load vocabulary from an HTTP endpoint returning the same JSON document."""

    def __init__(self, url: str, timeout: float = 10):
        self.url = url
        self.timeout = timeout

    def fetch_vocabulary(self) -> VocabularyPayload:
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise ContentLoadError(f"Failed to load vocab: {exc}", source=self.url) from exc
        except ValueError as exc:
            raise ContentLoadError(f"Invalid JSON from {self.url}: {exc}", source=self.url) from exc
        return parse_payload(data)


def build_content_loader(config) -> Any:
    """Pick the loader for the app config: ``VOCAB_DATA_URL`` wins over the file path."""
    url = config.get('VOCAB_DATA_URL')
    if url:
        return HttpContentLoader(url, timeout=config.get('VOCAB_FETCH_TIMEOUT', 10))
    return JsonFileContentLoader(config['VOCAB_DATA_PATH'])
