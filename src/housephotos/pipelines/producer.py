"""
House producer: walks the page range and feeds houses to the download workers.
"""
from __future__ import annotations

from typing import Iterator, Optional

from config.settings import settings
from src.housephotos.models.house import House
from src.housephotos.pipelines.channel import HandoffChannel
from src.housephotos.scrapers.house_scraper import HouseScraper
from src.housephotos.utils.logger import get_logger

logger = get_logger(__name__)


class HouseProducer:
    """Emits every house of pages first_page..last_page, in page order."""

    def __init__(
        self,
        scraper: HouseScraper,
        first_page: Optional[int] = None,
        last_page: Optional[int] = None,
    ):
        self.scraper = scraper
        self.first_page = first_page if first_page is not None else settings.first_page
        self.last_page = last_page if last_page is not None else settings.last_page
        if self.first_page < 1 or self.last_page < self.first_page:
            raise ValueError(
                f"Invalid page range {self.first_page}..{self.last_page}"
            )

    def iter_houses(self) -> Iterator[House]:
        """
        Lazily yield houses page by page.

        Raises:
            PageFetchError: If a page cannot be fetched
            PageDecodeError: If a page body is malformed
        """
        for page in range(self.first_page, self.last_page + 1):
            houses_page = self.scraper.fetch_page(page)
            yield from houses_page.houses

    def run(self, channel: HandoffChannel[House]) -> int:
        """
        Send every house into the channel, then close it.

        On a fatal error pending houses are discarded before closing and
        the error is re-raised.

        Returns:
            Number of houses sent
        """
        sent = 0
        try:
            for house in self.iter_houses():
                channel.send(house)
                sent += 1
        except Exception as e:
            logger.error(
                "producer_failed",
                houses_sent=sent,
                error=str(e),
                error_type=type(e).__name__
            )
            channel.close(discard_pending=True)
            raise

        channel.close()
        logger.info(
            "producer_complete",
            pages=self.last_page - self.first_page + 1,
            houses_sent=sent
        )
        return sent
