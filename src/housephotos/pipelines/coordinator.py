"""
House photo pipeline.

Runs one producer thread that pages through the houses API and a fixed pool
of download workers fed through a bounded handoff channel.
"""
from __future__ import annotations

import argparse
import sys
import time
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

import requests

from config.settings import settings
from src.housephotos.downloaders.photo_downloader import PhotoDownloader, WorkerReport
from src.housephotos.exceptions import PipelineError
from src.housephotos.models.house import House
from src.housephotos.pipelines.channel import HandoffChannel
from src.housephotos.pipelines.producer import HouseProducer
from src.housephotos.scrapers.house_scraper import HouseScraper
from src.housephotos.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


@dataclass
class RunSummary:
    """Outcome of one pipeline run."""

    houses_emitted: int
    downloaded: int
    failed: int
    elapsed_seconds: float

    def to_dict(self) -> dict:
        return {
            "houses_emitted": self.houses_emitted,
            "downloaded": self.downloaded,
            "failed": self.failed,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
        }


class PhotoPipeline:
    """
    Wires the house producer to a pool of photo download workers.

    The HTTP session is created once and shared by the producer and every
    worker. run() blocks until all workers have drained the channel.
    """

    def __init__(
        self,
        workers: Optional[int] = None,
        first_page: Optional[int] = None,
        last_page: Optional[int] = None,
        output_dir: Optional[Path] = None,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        channel_capacity: Optional[int] = None,
    ):
        self.workers = workers if workers is not None else settings.download_workers
        if self.workers < 1:
            raise ValueError("workers must be at least 1")
        self.channel_capacity = (
            channel_capacity if channel_capacity is not None else settings.channel_capacity
        )
        if self.channel_capacity < 1:
            raise ValueError("channel_capacity must be at least 1")

        self.session = session or requests.Session()
        self.scraper = HouseScraper(base_url=base_url, session=self.session)
        self.producer = HouseProducer(self.scraper, first_page=first_page, last_page=last_page)
        self.downloader = PhotoDownloader(session=self.session, output_dir=output_dir)

    def run(self) -> RunSummary:
        """
        Run the producer and workers to completion.

        Returns:
            RunSummary with counts and elapsed time

        Raises:
            PipelineError: If the producer hit a fatal page error
            Exception: Whatever a crashed worker raised
        """
        start = time.perf_counter()
        self.downloader.output_dir.mkdir(parents=True, exist_ok=True)
        channel: HandoffChannel[House] = HandoffChannel(capacity=self.channel_capacity)

        logger.info(
            "pipeline_started",
            workers=self.workers,
            first_page=self.producer.first_page,
            last_page=self.producer.last_page,
            output_dir=str(self.downloader.output_dir)
        )

        with ThreadPoolExecutor(
            max_workers=self.workers + 1, thread_name_prefix="housephotos"
        ) as executor:
            producer_future = executor.submit(self.producer.run, channel)
            worker_futures = [
                executor.submit(self.downloader.consume, channel, worker_id)
                for worker_id in range(self.workers)
            ]
            done, _ = wait(worker_futures, return_when=FIRST_EXCEPTION)
            errors = [f.exception() for f in done if f.exception() is not None]
            if errors:
                # Unblock the producer so the executor can shut down
                logger.error(
                    "worker_crashed",
                    error=str(errors[0]),
                    error_type=type(errors[0]).__name__
                )
                channel.close(discard_pending=True)

        reports: List[WorkerReport] = [f.result() for f in worker_futures]
        houses_emitted = producer_future.result()

        summary = RunSummary(
            houses_emitted=houses_emitted,
            downloaded=sum(r.downloaded for r in reports),
            failed=sum(r.failed for r in reports),
            elapsed_seconds=time.perf_counter() - start,
        )
        logger.info("pipeline_complete", **summary.to_dict())
        return summary


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Download house photos from the houses API")
    parser.add_argument("--first-page", type=int, default=None, help="First page to fetch")
    parser.add_argument("--last-page", type=int, default=None, help="Last page to fetch (inclusive)")
    parser.add_argument("--workers", type=int, default=None, help="Number of download workers")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory photos are written to",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pipeline and return the process exit code."""
    args = parse_args(argv)
    setup_logging()

    try:
        pipeline = PhotoPipeline(
            workers=args.workers,
            first_page=args.first_page,
            last_page=args.last_page,
            output_dir=args.output_dir,
        )
        summary = pipeline.run()
    except PipelineError as e:
        logger.error("pipeline_failed", error=str(e), error_type=type(e).__name__)
        print(f"fatal: {e}", file=sys.stderr)
        return 1

    print(
        f"\nAll photo downloads complete: {summary.downloaded} downloaded, "
        f"{summary.failed} failed in {summary.elapsed_seconds:.1f}s"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
