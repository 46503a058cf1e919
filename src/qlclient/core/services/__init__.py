"""Domain services for qlclient."""

from qlclient.core.services.error_unifier import unify_exception, unify_response
from qlclient.core.services.normalizer import OperationNormalizer
from qlclient.core.services.response_parser import parse_response
from qlclient.core.services.result_cache import ResultCache

__all__ = [
    "OperationNormalizer",
    "ResultCache",
    "parse_response",
    "unify_exception",
    "unify_response",
]
