# File: vocabstack_app/modules/vocabulary/services/seed_data.py
# MỤC ĐÍCH: Sinh dữ liệu từ vựng mẫu (topics + entries) cho môi trường phát triển.

import json
import os
from typing import Dict, Iterable, List, Optional

from ..schemas import LEVELS

TOPIC_NAMES = (
    'Daily Life', 'Travel', 'Business', 'Technology', 'Health', 'Education', 'Food', 'Shopping',
    'Nature', 'Sports', 'Entertainment', 'Culture', 'Science', 'Work', 'Family', 'Friends',
    'Weather', 'Art', 'Music', 'News',
)

DEFAULT_ENTRY_COUNT = 3000


def read_word_list(path: str) -> List[str]:
    """One word per line; blank lines and ``#`` comments skipped, case-insensitive dedupe."""
    if not os.path.exists(path):
        return []
    with open(path, 'r', encoding='utf-8') as f:
        lines = [line.strip() for line in f]
    seen = set()
    words = []
    for word in lines:
        if not word or word.startswith('#'):
            continue
        key = word.lower()
        if key in seen:
            continue
        seen.add(key)
        words.append(word)
    return words


def build_topics() -> List[Dict[str, str]]:
    topics = []
    for i, name in enumerate(TOPIC_NAMES):
        level_index = i // 4
        topics.append({
            'id': '-'.join(name.lower().split()),
            'name': name,
            'level': LEVELS[level_index] if level_index < len(LEVELS) else 'B2',
        })
    return topics


def build_vocab(words: Optional[Iterable[str]] = None, count: Optional[int] = None) -> Dict[str, list]:
    """
    Build the ``{topics, entries}`` document.

    Words are taken in order; without a word list, synthetic ``word-<n>``
    entries are produced. Topic and level rotate with the entry number.
    """
    words = list(words or [])
    topics = build_topics()
    if count is None:
        count = min(len(words), DEFAULT_ENTRY_COUNT) if words else DEFAULT_ENTRY_COUNT

    entries = []
    for i in range(1, count + 1):
        word = words[i - 1] if i <= len(words) else f'word-{i}'
        topic = topics[i % len(topics)]
        entries.append({
            'id': str(i),
            'word': word,
            'meaningVi': f'nghĩa của từ {word}',
            'topicId': topic['id'],
            'level': LEVELS[i % len(LEVELS)],
            'examples': [
                {'en': f'I use {word} every day.', 'vi': f'Tôi dùng từ {word} mỗi ngày.'},
                {'en': f'This is an example with {word}.', 'vi': f'Đây là ví dụ với {word}.'},
            ],
        })

    return {'topics': topics, 'entries': entries}


def write_vocab(path: str, document: Dict[str, list]) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(document, f, ensure_ascii=False, indent=2)
