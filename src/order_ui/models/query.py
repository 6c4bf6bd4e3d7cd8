"""
Query state for the order list.

QueryState holds the user-controlled parameters that decide the next
request. It is immutable: each user action produces a new state through
one of the with_* transitions, which keeps "change the parameters" and
"fetch" as two separate steps.
"""

from dataclasses import dataclass, replace
from typing import Literal

PAGE_SIZE_OPTIONS: tuple[int, ...] = (10, 20, 50, 100)
DEFAULT_PAGE_SIZE = 20

RequestKind = Literal["list", "search"]
LIST: RequestKind = "list"
SEARCH: RequestKind = "search"


@dataclass(frozen=True, slots=True)
class FetchRequest:
    """
    Parameters of a single remote fetch.

    Attributes:
        kind: "search" when a search term is present, otherwise "list".
        query: The search term, or None for list requests.
        page: Page number (1-indexed).
        page_size: Number of items per page.
    """

    kind: RequestKind
    query: str | None
    page: int
    page_size: int


@dataclass(frozen=True, slots=True)
class QueryState:
    """
    Search term, page and page size of the order list.

    Attributes:
        search_term: Raw text from the search input.
        page: Current page number (1-indexed, no upper clamp).
        page_size: One of PAGE_SIZE_OPTIONS.
    """

    search_term: str = ""
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def with_search_term(self, value: str | None) -> "QueryState":
        """A new search always restarts pagination."""
        return replace(self, search_term=value or "", page=1)

    def with_page(self, page: int) -> "QueryState":
        """Move to the given page; the store is authoritative on range."""
        return replace(self, page=page)

    def with_page_size(self, page_size: int) -> "QueryState":
        """Change the page size and go back to the first page."""
        return replace(self, page_size=page_size, page=1)

    def to_request(self) -> FetchRequest:
        """Build the request this state calls for."""
        if self.search_term:
            return FetchRequest(SEARCH, self.search_term, self.page, self.page_size)
        return FetchRequest(LIST, None, self.page, self.page_size)
