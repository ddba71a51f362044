"""Domain layer for the content module and the shared kernel."""
