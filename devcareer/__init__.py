"""DevCareer AI tools backend."""

__version__ = "1.0.0"
