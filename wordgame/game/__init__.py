from .session import GameSession, GameState, GuessOutcome, new_session

__all__ = ["GameSession", "GameState", "GuessOutcome", "new_session"]
