"""
Profile markdown normalizer for the Parsing context.

Cleans characters that break line-oriented matching before any section is
located. Content characters (dashes, quotes, accents) are left untouched so
recovered values keep the author's spelling.
"""

# Problematic char → replacement
INVISIBLE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space → space
    "\u202f": " ",  # narrow no-break space
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM / zero-width no-break space
}


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def remove_invisible_characters(text: str) -> str:
    """
    Replace non-breaking spaces and drop zero-width characters.

    Args:
        text: Raw profile markdown

    Returns:
        Text with invisible characters normalized
    """
    for char, replacement in INVISIBLE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def preprocess_profile_markdown(text: str) -> str:
    """
    Preprocess profile markdown before section location.

    This is the main entry point for markdown normalization.
    Handles:
    - Line endings (CRLF/CR → LF)
    - Invisible characters (non-breaking and zero-width spaces, BOM)

    Args:
        text: Raw profile markdown

    Returns:
        Normalized markdown ready for section location
    """
    text = normalize_line_endings(text)
    text = remove_invisible_characters(text)
    return text
