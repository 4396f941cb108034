"""Correlation context types and ambient accessors."""

from .info import CorrelationInfo
from .scope import correlation_scope
from .accessor import CorrelationInfoAccessor, DefaultCorrelationInfoAccessor, default_correlation_accessor

__all__ = [
    "CorrelationInfo",
    "CorrelationInfoAccessor",
    "DefaultCorrelationInfoAccessor",
    "default_correlation_accessor",
    "correlation_scope",
]
