"""Wikipedia-backed web lookup adapter."""

from __future__ import annotations

import logging

import requests
from bs4 import BeautifulSoup

from ...common.utils import clean_text
from ...domain.exceptions import PageFetchError, SearchUnavailableError
from ...domain.models import SearchOutcome, SearchResult, SearchStatus
from ...domain.prompts import SEARCH_NO_RESULTS, SEARCH_UNAVAILABLE

logger = logging.getLogger(__name__)

RESULTS_HEADER = "Search results from Wikipedia:\n\n"


class WikipediaSearchAdapter:
    """Query Wikipedia opensearch and pull an excerpt from the top article."""

    DEFAULT_ENDPOINT = "https://en.wikipedia.org/w/api.php"
    USER_AGENT = "Mozilla/5.0 (compatible; WebDocChat/1.0)"
    CONTENT_SELECTOR = ".mw-parser-output > p"

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 5.0,
        max_results: int = 3,
        paragraph_limit: int = 5,
        min_paragraph_chars: int = 50,
        excerpt_chars: int = 2000,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            endpoint: MediaWiki API URL.
            timeout: Per-request timeout in seconds.
            max_results: Number of candidates requested from opensearch.
            paragraph_limit: Leading paragraphs inspected on the top page.
            min_paragraph_chars: Shorter paragraphs are dropped.
            excerpt_chars: Maximum length of the page excerpt.
            session: Optional preconfigured HTTP session.
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.max_results = max_results
        self.paragraph_limit = paragraph_limit
        self.min_paragraph_chars = min_paragraph_chars
        self.excerpt_chars = excerpt_chars
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.USER_AGENT})

    def __enter__(self) -> "WikipediaSearchAdapter":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()

    def lookup(self, query: str) -> SearchOutcome:
        """Search Wikipedia and format the results as a context block.

        Never raises for network or parse problems: a failed search yields an
        UNAVAILABLE outcome and a failed page fetch a DEGRADED one.
        """
        try:
            results = self.search(query)
        except SearchUnavailableError as e:
            logger.warning("Search error for %r: %s", query, e.cause or e)
            return SearchOutcome(status=SearchStatus.UNAVAILABLE, text=SEARCH_UNAVAILABLE)

        if not results:
            logger.info("No search results for %r", query)
            return SearchOutcome(status=SearchStatus.NO_RESULTS, text=SEARCH_NO_RESULTS)

        text = format_results(results)
        top = results[0]
        if not top.url:
            return SearchOutcome(status=SearchStatus.COMPLETE, text=text, results=results)

        try:
            excerpt = self.fetch_excerpt(top.url)
        except PageFetchError as e:
            logger.warning("Error fetching page content from %s: %s", top.url, e.cause or e)
            return SearchOutcome(status=SearchStatus.DEGRADED, text=text, results=results)

        if excerpt:
            text += f"\nDetailed content from {top.title}:\n{excerpt}"
        return SearchOutcome(
            status=SearchStatus.COMPLETE, text=text, results=results, excerpt=excerpt
        )

    def search(self, query: str) -> list[SearchResult]:
        """Fetch up to ``max_results`` opensearch candidates.

        Raises:
            SearchUnavailableError: If the endpoint cannot be queried or the
                payload is not an opensearch response.
        """
        params = {
            "action": "opensearch",
            "search": query,
            "limit": self.max_results,
            "format": "json",
        }
        try:
            response = self.session.get(self.endpoint, params=params, timeout=self.timeout)
            response.raise_for_status()
            return parse_opensearch(response.json())
        except SearchUnavailableError:
            raise
        except Exception as e:
            raise SearchUnavailableError(
                "Search endpoint request failed", cause=e, context={"query": query}
            ) from e

    def fetch_excerpt(self, url: str) -> str:
        """Return the leading article paragraphs of ``url`` as one excerpt.

        Raises:
            PageFetchError: If the page cannot be fetched or parsed.
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            soup = BeautifulSoup(response.text, "lxml")
            paragraphs = [
                p.get_text().strip()
                for p in soup.select(self.CONTENT_SELECTOR)[: self.paragraph_limit]
            ]
        except Exception as e:
            raise PageFetchError("Page fetch failed", cause=e, context={"url": url}) from e

        kept = [clean_text(p) for p in paragraphs if len(p) >= self.min_paragraph_chars]
        return "\n\n".join(kept)[: self.excerpt_chars]


def parse_opensearch(data: object) -> list[SearchResult]:
    """Turn an opensearch ``[query, titles, descriptions, urls]`` payload into results.

    Raises:
        SearchUnavailableError: If the payload has titles but is otherwise malformed.
    """
    if not isinstance(data, list) or len(data) < 2 or not data[1]:
        return []

    titles = data[1]
    descriptions = data[2] if len(data) > 2 and isinstance(data[2], list) else []
    links = data[3] if len(data) > 3 and isinstance(data[3], list) else []
    if not isinstance(titles, list):
        raise SearchUnavailableError("Malformed opensearch payload", context={"payload": data})

    return [
        SearchResult(
            title=str(title),
            description=str(descriptions[i]) if i < len(descriptions) else "",
            url=str(links[i]) if i < len(links) else "",
        )
        for i, title in enumerate(titles)
    ]


def format_results(results: list[SearchResult]) -> str:
    """Render candidates as a numbered title / description / URL list."""
    text = RESULTS_HEADER
    for i, result in enumerate(results, start=1):
        text += f"{i}. {result.title}\n{result.description}\nURL: {result.url}\n\n"
    return text
