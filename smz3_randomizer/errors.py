class InvalidConfigurationError(Exception):
    """Raised when the seed settings are invalid or contradict each other"""
    pass


class FillError(Exception):
    """Raised when an item has no legal location left in the current attempt"""
    pass


class PlaythroughError(Exception):
    """Raised when a filled world cannot be completed"""
    pass


class RandomizerGenerationException(Exception):
    """Raised when every attempt at generating a seed has failed"""
    pass


class GenerationCancelled(Exception):
    """Raised when the caller cancels a running generation"""
    pass
