"""LearnHub identity module: users and their lifecycle."""
