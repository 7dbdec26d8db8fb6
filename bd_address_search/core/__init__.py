"""Core search engine functionality."""

from .address import format_address, format_address_bengali, format_address_english
from .catalog import LocationCatalog, get_catalog, load_catalog
from .engine import SearchEngine
from .fuzzy_matcher import FuzzyMatcher, calculate_similarity, levenshtein_distance
from .normalizer import TextNormalizer
from .orchestrator import LocationSearch

__all__ = [
    "SearchEngine",
    "FuzzyMatcher",
    "TextNormalizer",
    "LocationCatalog",
    "LocationSearch",
    "calculate_similarity",
    "levenshtein_distance",
    "format_address",
    "format_address_bengali",
    "format_address_english",
    "get_catalog",
    "load_catalog",
]
