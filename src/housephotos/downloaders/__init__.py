"""
Downloaders Package

Photo download workers.
"""

from .photo_downloader import PhotoDownloader, WorkerReport

__all__ = ["PhotoDownloader", "WorkerReport"]
