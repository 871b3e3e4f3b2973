# File: vocabstack_app/modules/vocabulary/engine/filters.py
# Filter pipeline - pure functions, no Flask, no database.

from typing import Callable, List, Optional, Sequence, Tuple

from ..schemas import KNOWLEDGE_FILTER_ALL, EntryDTO, FilterParams


def clamp_range(start: Optional[int], end: Optional[int], total: int) -> Tuple[int, int]:
    """
    Clamp 1-based inclusive bounds into ``[1, total]`` with ``start <= end``.

    A missing or non-positive ``start`` becomes 1; ``end=None`` means the
    last entry. Returns ``(0, 0)`` when there are no entries.
    """
    if total <= 0:
        return 0, 0
    s = max(1, min(start or 1, total))
    e_raw = total if end is None else end
    e = max(s, min(e_raw, total))
    return s, e


def matches_search(entry: EntryDTO, needle: str) -> bool:
    """Case-insensitive substring match on word, meaning and example texts."""
    if needle in entry.word.lower() or needle in entry.meaning_vi.lower():
        return True
    for ex in entry.examples:
        if needle in ex.en.lower() or needle in ex.vi.lower():
            return True
    return False


def build_pipeline(
    entries: Sequence[EntryDTO],
    params: FilterParams,
    read_knowledge: Callable[[str], str],
    apply_topics: bool = True,
) -> List[int]:
    """
    Return the indices of entries passing every active filter, ascending.

    ``apply_topics=False`` gives the base pipeline used for per-topic
    statistics, where the topic selection itself must not hide buckets.
    """
    s, e = clamp_range(params.start, params.end, len(entries))
    if not s:
        return []

    pipeline = list(range(s - 1, e))

    if apply_topics and params.topics:
        pipeline = [i for i in pipeline if entries[i].topic_id in params.topics]
    if params.levels:
        pipeline = [i for i in pipeline if entries[i].level in params.levels]
    if params.knowledge and params.knowledge != KNOWLEDGE_FILTER_ALL:
        pipeline = [i for i in pipeline if read_knowledge(entries[i].id) == params.knowledge]

    # Whitespace-only search is inactive; otherwise the text is matched as typed.
    search = params.search or ''
    if search.strip():
        needle = search.lower()
        pipeline = [i for i in pipeline if matches_search(entries[i], needle)]

    return pipeline
