from .boundary import CallableQueryBoundary, IQueryBoundary
from .trigger import QueryTrigger

__all__ = ["CallableQueryBoundary", "IQueryBoundary", "QueryTrigger"]
