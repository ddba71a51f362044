"""FastAPI presentation layer for LearnHub."""
