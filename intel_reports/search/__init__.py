"""
Entity search: directory client and debounced search provider.
"""
from intel_reports.search.debounce import Debouncer
from intel_reports.search.directory_client import DirectoryClient, parse_companies
from intel_reports.search.entity_search import EntitySearchProvider

__all__ = ["Debouncer", "DirectoryClient", "EntitySearchProvider", "parse_companies"]
