"""Exceptions raised by wordrush. Only startup problems are errors; gameplay never fails."""


class WordrushError(Exception):
    pass


class DictionaryError(WordrushError):
    pass


class ConfigError(WordrushError):
    pass


class PromptGenerationError(ConfigError):
    """No fragment reached the requested word density within the attempt cap."""
