"""Python linter and formatter built on tree-sitter."""

__version__ = "0.1.0"
