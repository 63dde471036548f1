"""JobSpark backend: session tokens, user documents and profile scoring."""

__version__ = "1.0.0"
