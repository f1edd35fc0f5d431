"""
PRISM - Profile Recovery from Informal Structured Markdown

Recovers a structured record of a person's work history, education, projects,
volunteering, skills and interests from a rendered profile in markdown.

Architecture:
- Parsing Context: Deterministic section location and field extraction
- Intake Context: Profile fetching, pipeline orchestration and persistence
- Enrichment Context: LLM keyword extraction, embeddings and LLM parsing
"""

__version__ = "0.1.0"
