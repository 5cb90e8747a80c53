"""
House Photo Downloader

Worker loop that takes houses off the handoff channel and streams each
house photo to a file named after the house.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import requests

from config.settings import settings
from src.housephotos.models.house import House
from src.housephotos.pipelines.channel import HandoffChannel
from src.housephotos.utils.logger import bind_log_context, clear_log_context, get_logger

logger = get_logger(__name__)


@dataclass
class WorkerReport:
    """Per-worker tally returned when the channel is drained."""

    worker_id: int
    downloaded: int = 0
    failed: int = 0


class PhotoDownloader:
    """
    Downloads house photos into output_dir.

    Each photo gets a single attempt. Network and filesystem errors are
    logged and the house is skipped; they never stop the worker.

    Files are named id-{id}-{address}.{ext}. Two houses deriving the same
    name overwrite each other.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        output_dir: Optional[Union[str, Path]] = None,
        timeout: Optional[int] = None,
        chunk_size: Optional[int] = None,
    ):
        """
        Initialize the photo downloader.

        Args:
            session: Shared HTTP session (None = create one)
            output_dir: Destination directory (default: settings.output_dir)
            timeout: Per-request timeout in seconds
            chunk_size: Bytes per streamed chunk
        """
        self.session = session or requests.Session()
        self.output_dir = Path(output_dir if output_dir is not None else settings.output_dir)
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self.chunk_size = chunk_size if chunk_size is not None else settings.download_chunk_size
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")

    @staticmethod
    def build_filename(house: House) -> str:
        """
        Derive the photo filename for a house.

        Args:
            house: House record

        Returns:
            Filename such as "id-1-4 Main St.jpg"
        """
        name = f"id-{house.id}-{house.normalized_address}"
        extension = house.photo_extension
        if extension:
            name = f"{name}.{extension}"
        return name

    def destination_for(self, house: House) -> Path:
        return self.output_dir / self.build_filename(house)

    def download(self, house: House) -> Optional[Path]:
        """
        Stream one house photo to disk.

        Args:
            house: House whose photo to fetch

        Returns:
            Path of the written file, or None if the download failed
        """
        destination = self.destination_for(house)
        filename = destination.name

        try:
            with self.session.get(house.photo_url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                bytes_written = 0
                with open(destination, "wb") as f:
                    for chunk in response.iter_content(chunk_size=self.chunk_size):
                        if chunk:
                            f.write(chunk)
                            bytes_written += len(chunk)

        except requests.RequestException as e:
            logger.error(
                "photo_download_failed",
                filename=filename,
                url=house.photo_url,
                error=str(e),
                error_type=type(e).__name__
            )
            return None

        except OSError as e:
            logger.error(
                "photo_write_failed",
                filename=filename,
                path=str(destination),
                error=str(e),
                error_type=type(e).__name__
            )
            return None

        logger.info(
            "photo_downloaded",
            filename=filename,
            house_id=house.id,
            bytes=bytes_written
        )
        return destination

    def consume(self, channel: HandoffChannel[House], worker_id: int = 0) -> WorkerReport:
        """
        Download photos for houses received from the channel until it is
        closed and drained.

        Args:
            channel: Channel fed by the house producer
            worker_id: Identifier used in log context

        Returns:
            WorkerReport with this worker's counts
        """
        report = WorkerReport(worker_id=worker_id)
        bind_log_context(worker_id=worker_id)
        try:
            for house in channel:
                if self.download(house) is None:
                    report.failed += 1
                else:
                    report.downloaded += 1

            logger.debug(
                "worker_finished",
                downloaded=report.downloaded,
                failed=report.failed
            )
        finally:
            clear_log_context()
        return report
