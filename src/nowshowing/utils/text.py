"""Text clean-up utilities for scraped listings."""

import re

# Zero-width characters that rendered pages leak into innerText
_INVISIBLE = re.compile(r"[\u200b\u200c\u200d\ufeff]")


def clean_text(text: str) -> str:
    """
    Collapse a scraped string into a single tidy line.

    - Zero-width characters are removed
    - Non-breaking spaces become ordinary spaces
    - Runs of whitespace (including newlines) collapse to one space

    Args:
        text: Raw text from a page or API response

    Returns:
        Cleaned text with no leading/trailing whitespace
    """
    text = _INVISIBLE.sub("", text)
    text = text.replace("\xa0", " ")
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def split_lines(text: str) -> list[str]:
    """Split a document into its non-empty, trimmed lines."""
    lines = (clean_text(line) for line in re.split(r"\n+", text))
    return [line for line in lines if line]


def slugify(text: str) -> str:
    """
    Convert text to a URL-safe slug.

    Args:
        text: Text to slugify

    Returns:
        Lowercase slug with hyphens
    """
    # Convert to lowercase
    text = text.lower()

    # Replace spaces and underscores with hyphens
    text = re.sub(r"[\s_]+", "-", text)

    # Remove non-alphanumeric characters (except hyphens)
    text = re.sub(r"[^a-z0-9-]", "", text)

    # Remove multiple consecutive hyphens
    text = re.sub(r"-+", "-", text)

    # Strip leading/trailing hyphens
    text = text.strip("-")

    return text
