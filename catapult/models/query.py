"""Pagination parameters for collection endpoints."""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
from urllib.parse import urlencode


class Order(Enum):
    ASC = 'asc'
    DESC = 'desc'


@dataclass(frozen=True)
class QueryParams:
    """Page size, starting id and ordering for a paginated request.

    Only the parameters that were supplied end up in the query string.
    """
    page_size: Optional[int] = None
    id: Optional[str] = None
    order: Optional[Order] = None

    def to_url(self) -> str:
        """Render the parameters as a query string, e.g. ``?pageSize=25``.

        Returns:
            An empty string when no parameter is set
        """
        params: List[tuple] = []
        if self.page_size is not None:
            params.append(('pageSize', self.page_size))
        if self.id is not None:
            params.append(('id', self.id))
        if self.order is not None:
            params.append(('order', self.order.value))
        return '?' + urlencode(params) if params else ''
