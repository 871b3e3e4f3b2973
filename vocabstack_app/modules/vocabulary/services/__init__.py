from .content_loader import HttpContentLoader, JsonFileContentLoader, build_content_loader, parse_payload
from .knowledge_store import KnowledgeStore
from .query_params import filter_params_from_query, filter_params_to_query

__all__ = [
    'HttpContentLoader',
    'JsonFileContentLoader',
    'KnowledgeStore',
    'build_content_loader',
    'filter_params_from_query',
    'filter_params_to_query',
    'parse_payload',
]
