"""LearnHub backend: shared kernel, content module, HTTP API and CLI."""
