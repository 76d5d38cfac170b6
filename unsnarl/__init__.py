"""unsnarl: structural maintainability checks over tree-sitter syntax trees."""

__version__ = "0.3.0"
