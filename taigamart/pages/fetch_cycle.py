"""
Page Fetch Cycle

Drives the list state of one page:

    IDLE -> LOADING -> LOADED | LOADED_EMPTY
                    -> ERROR  (last-known items kept)

Every load takes a ticket from a monotonically increasing counter. When a
load finishes after a newer one has started (page or filters changed while
it was in flight) its result is discarded, so a slow early response can
never overwrite a later one.

Remote failures never escape a cycle: they become `error` (or
`redirect_to` for an expired session) and the loading flag is always
cleared by the latest load.
"""

import itertools
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ..api.errors import APIError, AuthenticationExpired
from ..normalization import extract_last_page, unwrap_item, unwrap_list

logger = logging.getLogger(__name__)


class FetchStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    LOADED_EMPTY = "loaded_empty"
    ERROR = "error"


def _identity(record: Any) -> Any:
    return record


class FetchCycle:
    """
    Non-paginated list fetch.

    Args:
        fetch: Callable returning a response body (any envelope shape)
        normalize: Applied to each unwrapped record
        name: Label used in log messages

    Usage:
        cycle = FetchCycle(catalog.get_categories, normalize_category)
        cycle.load()
        cycle.items  # [Category, ...]
    """

    def __init__(
        self,
        fetch: Callable[..., Any],
        normalize: Callable[[Any], Any] = _identity,
        name: str = "list",
    ):
        self._fetch = fetch
        self._normalize = normalize
        self.name = name

        self.items: List[Any] = []
        self.status = FetchStatus.IDLE
        self.loading = False
        self.error: Optional[str] = None
        self.redirect_to: Optional[str] = None

        self._tickets = itertools.count(1)
        self._latest = 0

    def _request_kwargs(self) -> Dict[str, Any]:
        return {}

    def _apply(self, body: Any) -> None:
        self.items = [self._normalize(record) for record in unwrap_list(body)]

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest

    @property
    def is_empty(self) -> bool:
        return self.status == FetchStatus.LOADED_EMPTY

    def load(self) -> bool:
        """
        Run one fetch.

        Returns:
            True if this load's result was applied
        """
        ticket = next(self._tickets)
        self._latest = ticket
        self.loading = True
        self.status = FetchStatus.LOADING
        self.error = None

        try:
            body = self._fetch(**self._request_kwargs())
            if not self.is_current(ticket):
                logger.debug("Discarding stale %s response (request %d, latest %d)",
                             self.name, ticket, self._latest)
                return False

            self._apply(body)
            self.redirect_to = None
            self.status = FetchStatus.LOADED if self.items else FetchStatus.LOADED_EMPTY
            return True

        except AuthenticationExpired as e:
            logger.warning("Session expired while loading %s", self.name)
            if self.is_current(ticket):
                self.redirect_to = e.login_route
                self.status = FetchStatus.ERROR
            return False

        except APIError as e:
            logger.error("Failed to load %s: %s", self.name, e.message)
            if self.is_current(ticket):
                self.error = e.message
                self.status = FetchStatus.ERROR
            return False

        finally:
            if self.is_current(ticket):
                self.loading = False


class PaginatedFetchCycle(FetchCycle):
    """
    Paginated list fetch.

    The fetch callable receives page, per_page and the current filters
    mapping. Changing filters resets pagination to page 1 of 1 until the
    new response reports its own total.

    Usage:
        cycle = PaginatedFetchCycle(
            lambda page, per_page, filters: products.get_products(page=page, per_page=per_page),
            normalize_product, per_page=24)
        cycle.load()
        cycle.set_page(2)
    """

    def __init__(
        self,
        fetch: Callable[..., Any],
        normalize: Callable[[Any], Any] = _identity,
        per_page: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
        name: str = "list",
    ):
        super().__init__(fetch, normalize, name=name)
        self.per_page = per_page
        self.filters: Dict[str, Any] = dict(filters or {})
        self.current_page = 1
        self.total_pages = 1

    def _request_kwargs(self) -> Dict[str, Any]:
        return {
            'page': self.current_page,
            'per_page': self.per_page,
            'filters': dict(self.filters),
        }

    def _apply(self, body: Any) -> None:
        super()._apply(body)
        self.total_pages = extract_last_page(body)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def set_page(self, page: int) -> bool:
        """Move to another page (clamped to >= 1) and reload."""
        self.current_page = max(1, int(page))
        return self.load()

    def set_filters(self, **filters: Any) -> bool:
        """Replace the filters (None values dropped), reset pagination and reload."""
        self.filters = {k: v for k, v in filters.items() if v is not None}
        self.current_page = 1
        self.total_pages = 1
        return self.load()


class ItemFetchCycle(FetchCycle):
    """
    Single-record fetch ({"data": {...}} envelope).

    `item` holds the normalized record, or None when the response had none.
    """

    def __init__(
        self,
        fetch: Callable[..., Any],
        normalize: Callable[[Any], Any] = _identity,
        name: str = "item",
    ):
        super().__init__(fetch, normalize, name=name)
        self.item: Any = None

    def _apply(self, body: Any) -> None:
        record = unwrap_item(body)
        self.item = self._normalize(record) if record is not None else None
        self.items = [self.item] if self.item is not None else []
