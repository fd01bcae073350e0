from .core import GameSession, RoundNotStartedError, new_session

__all__ = ["GameSession", "RoundNotStartedError", "new_session"]
