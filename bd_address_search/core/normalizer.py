"""Text normalization utilities for consistent query and name processing."""

import re
import unicodedata
from typing import Optional


class TextNormalizer:
    """Handles case folding, query cleanup and slug generation."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        # Anything that is not a word character becomes a slug separator
        self.separator_regex = re.compile(r"[^\w]+", re.UNICODE)

    def fold(self, text: str, case_sensitive: bool = False) -> str:
        """
        Apply optional case folding.

        Args:
            text: Input text
            case_sensitive: Leave the text untouched when True

        Returns:
            Folded text
        """
        return text if case_sensitive else text.lower()

    def clean_query(self, query: Optional[str]) -> Optional[str]:
        """
        Strip surrounding whitespace from a query.

        Args:
            query: Raw query

        Returns:
            The trimmed query, or None when nothing is left
        """
        if not query:
            return None
        cleaned = query.strip()
        return cleaned or None

    def slugify(self, text: str) -> str:
        """
        Build a lowercase URL-safe slug.

        Args:
            text: Input text (e.g. an English location name)

        Returns:
            Slug with words joined by hyphens
        """
        if not text:
            return ""

        normalized = unicodedata.normalize("NFKD", text.lower())
        normalized = normalized.encode("ascii", "ignore").decode("ascii")

        # Apostrophes are dropped rather than split on: "Cox's" -> "coxs"
        normalized = normalized.replace("'", "")
        normalized = self.separator_regex.sub("-", normalized)

        return normalized.strip("-")
