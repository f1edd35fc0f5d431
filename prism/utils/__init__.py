"""
Shared utilities for PRISM.

Common functionality used across contexts:
- Text processing
- Logging setup
- LLM provider access
"""

from prism.utils.text_processing import dedupe, non_empty_lines, strip_bold

__all__ = ["dedupe", "non_empty_lines", "strip_bold"]
