from .errors import WordGameError, InvalidLengthError, EmptyDictionaryError
from .engine import LetterFeedback, evaluate, candidates
from .game import GameSession, GameState, GuessOutcome, new_session

__all__ = [
    "WordGameError", "InvalidLengthError", "EmptyDictionaryError",
    "LetterFeedback", "evaluate", "candidates",
    "GameSession", "GameState", "GuessOutcome", "new_session",
]
