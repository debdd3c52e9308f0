"""inlineref: inline reference resolution for editor content."""

__version__ = "0.1.0"
