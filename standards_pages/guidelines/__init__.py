"""Guideline documents: front matter parsing, metadata extraction, loading."""

from .extractor import extract_metadata, normalize_tags
from .frontmatter import split_front_matter
from .loader import load_guideline, load_guidelines, parse_guideline
from .models import Guideline, GuidelineMetadata, GuidelineMetadataError

__all__ = [
    "Guideline",
    "GuidelineMetadata",
    "GuidelineMetadataError",
    "extract_metadata",
    "load_guideline",
    "load_guidelines",
    "normalize_tags",
    "parse_guideline",
    "split_front_matter",
]
