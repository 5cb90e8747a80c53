"""
House Photos - Core Package

Fetches paginated house records from the houses API and downloads each
house photo to local storage with a pool of worker threads.
"""

__version__ = "0.1.0"
