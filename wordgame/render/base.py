from __future__ import annotations
from typing import Dict, Iterable, List, Sequence, Type

from wordgame.engine import LetterFeedback, Observation

# ---- Global renderer registry ----
REGISTRY: Dict[str, Type["BaseRenderer"]] = {}


def register(cls: Type["BaseRenderer"]) -> Type["BaseRenderer"]:
    """
    Decorator: @register on a renderer class adds it to REGISTRY by its `id`.
    """
    rid = getattr(cls, "id", None)
    if not rid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if rid in REGISTRY:
        raise ValueError(f"Duplicate renderer id: {rid}")
    REGISTRY[rid] = cls
    return cls


# ---- Base class that renderers inherit ----
class BaseRenderer:
    """
    Maps LetterFeedback to text. Renderers only present feedback the engine
    already computed; they never compare a guess with the answer themselves.
    """
    id = "base"
    name = "Base"

    # Separator placed between cells of a row.
    sep = " "

    def cell(self, letter: str, feedback: LetterFeedback) -> str:
        raise NotImplementedError("Override in subclass")

    def render_row(self, guess: str, feedback: Sequence[LetterFeedback]) -> str:
        return self.sep.join(self.cell(ch, fb) for ch, fb in zip(guess, feedback))

    def render_board(self, observations: Iterable[Observation]) -> str:
        rows: List[str] = [self.render_row(o.guess, o.feedback) for o in observations]
        return "\n".join(rows)
