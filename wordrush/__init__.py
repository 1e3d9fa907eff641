"""Real-time word game: find a word containing the prompt before the countdown ends."""

__version__ = "0.1.0"
