"""Command-line interface for LearnHub."""
