"""Command-line interface for unina (``python -m unina.cli``)."""
