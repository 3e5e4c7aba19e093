"""Generate a README.md for a public GitHub repository with a single LLM call."""

__version__ = "0.1.0"
