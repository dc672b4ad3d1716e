from .entropy import score_guess, rank, best
from .brain import CandidateBrain

__all__ = ["score_guess", "rank", "best", "CandidateBrain"]
