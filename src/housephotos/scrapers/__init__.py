"""
Scrapers Package

Page fetchers for the houses API.
"""

from .house_scraper import HouseScraper

__all__ = [
    "HouseScraper",
]
