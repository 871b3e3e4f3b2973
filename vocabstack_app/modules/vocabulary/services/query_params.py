# File: vocabstack_app/modules/vocabulary/services/query_params.py
# MỤC ĐÍCH: Chuyển đổi qua lại giữa query string (q, s, e, topics, lvls, kf, mix) và FilterParams.

from typing import Dict, List, Mapping, Optional

from ..schemas import KNOWLEDGE_FILTER_ALL, KNOWLEDGE_FILTERS, FilterParams


def _get_bool(args: Mapping, key: str, default: bool) -> bool:
    value = args.get(key)
    if value is None:
        return default
    return value == '1' or value.lower() == 'true'


def _get_positive_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None
    return number if number > 0 else None


def _get_csv(args: Mapping, key: str) -> List[str]:
    value = args.get(key)
    if not value:
        return []
    return [part for part in value.split(',') if part]


def filter_params_from_query(args: Mapping) -> FilterParams:
    """
    Build :class:`FilterParams` from request arguments.

    Invalid or non-positive numbers fall back to the defaults and an
    unrecognized ``kf`` falls back to ``all``.
    """
    knowledge = args.get('kf') or KNOWLEDGE_FILTER_ALL
    if knowledge not in KNOWLEDGE_FILTERS:
        knowledge = KNOWLEDGE_FILTER_ALL

    return FilterParams(
        start=_get_positive_int(args.get('s')) or 1,
        end=_get_positive_int(args.get('e')),
        topics=frozenset(_get_csv(args, 'topics')),
        levels=frozenset(_get_csv(args, 'lvls')),
        knowledge=knowledge,
        search=args.get('q') or '',
        mix=_get_bool(args, 'mix', False),
    )


def filter_params_to_query(params: FilterParams) -> Dict[str, str]:
    """Inverse of :func:`filter_params_from_query`, omitting defaults."""
    query = {}
    if params.search:
        query['q'] = params.search
    if params.start != 1:
        query['s'] = str(params.start)
    if params.end is not None:
        query['e'] = str(params.end)
    if params.topics:
        query['topics'] = ','.join(sorted(params.topics))
    if params.levels:
        query['lvls'] = ','.join(sorted(params.levels))
    if params.knowledge != KNOWLEDGE_FILTER_ALL:
        query['kf'] = params.knowledge
    if params.mix:
        query['mix'] = '1'
    return query
