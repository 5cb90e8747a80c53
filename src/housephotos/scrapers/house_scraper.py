"""
House Page Scraper

Fetches pages of house records from the houses API, retrying pages that
answer with a non-200 status.
"""
import requests
from typing import Optional
from pydantic import ValidationError

from config.settings import settings
from src.housephotos.exceptions import PageDecodeError, PageFetchError, RetryExhaustedError
from src.housephotos.models.house import HousesPage
from src.housephotos.utils.logger import get_logger

logger = get_logger(__name__)


class HouseScraper:
    """
    Scraper for paginated house data.

    Each page is requested with a fixed timeout. Non-200 responses are
    retried up to max_attempts requests in total; a transport error is not
    retried and fails the fetch straight away. Both outcomes are fatal for
    the run.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        max_attempts: Optional[int] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize the house scraper.

        Args:
            base_url: Override the default API URL (for testing)
            session: Shared HTTP session (None = create one)
            max_attempts: Total requests allowed per page
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url or settings.houses_api_url
        self.session = session or requests.Session()
        self.max_attempts = max_attempts if max_attempts is not None else settings.max_fetch_attempts
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        logger.info(
            "house_scraper_initialized",
            base_url=self.base_url,
            max_attempts=self.max_attempts,
            timeout=self.timeout
        )

    def page_url(self, page: int) -> str:
        """Build the URL of a 1-indexed page."""
        return f"{self.base_url}?page={page}"

    def request_with_retry(self, url: str) -> requests.Response:
        """
        GET a URL until it answers 200 OK.

        Args:
            url: URL to request

        Returns:
            The successful response

        Raises:
            PageFetchError: On a transport error (no retry)
            RetryExhaustedError: When every attempt returned a non-200 status
        """
        attempts = 0
        while attempts < self.max_attempts:
            try:
                response = self.session.get(url, timeout=self.timeout)
            except requests.RequestException as e:
                logger.error(
                    "page_request_failed",
                    url=url,
                    attempt=attempts + 1,
                    error=str(e),
                    error_type=type(e).__name__
                )
                raise PageFetchError(
                    f"error requesting {url}",
                    cause=e,
                    context={"url": url, "attempts": attempts + 1},
                ) from e

            if response.status_code == 200:
                return response

            attempts += 1
            logger.warning(
                "page_fetch_retry",
                url=url,
                status_code=response.status_code,
                attempt=attempts,
                max_attempts=self.max_attempts
            )
            response.close()

        raise RetryExhaustedError(
            f"endpoint {url} was consistently failing",
            context={"url": url, "attempts": attempts},
        )

    def fetch_page(self, page: int) -> HousesPage:
        """
        Fetch and decode one page of houses.

        Args:
            page: 1-indexed page number

        Returns:
            Decoded HousesPage

        Raises:
            PageFetchError: If the page could not be retrieved
            PageDecodeError: If the body is not a valid houses page
        """
        url = self.page_url(page)
        response = self.request_with_retry(url)
        houses_page = self._parse_response(response, url)

        logger.info(
            "page_fetched",
            page=page,
            houses_count=len(houses_page.houses)
        )
        return houses_page

    def _parse_response(self, response: requests.Response, url: str) -> HousesPage:
        """
        Decode a page response into a HousesPage.

        Args:
            response: Successful page response
            url: Page URL, for error context

        Returns:
            Validated HousesPage
        """
        try:
            return HousesPage.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(
                "page_decode_failed",
                url=url,
                error=str(e),
                error_type=type(e).__name__
            )
            raise PageDecodeError(
                "error decoding json response",
                cause=e,
                context={"url": url},
            ) from e
