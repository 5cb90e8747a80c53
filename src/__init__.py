"""
House Photos - Source Root

Holds the housephotos package: the houses API scraper, the photo download
workers and the pipeline that connects them.
"""
