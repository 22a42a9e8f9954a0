"""
Score and high-score bookkeeping.
"""

import math


class Scoreboard:
    """
    Tracks the running score and the session high score.

    Points per food are floor(1 * score_multiplier * difficulty_multiplier).
    The high score survives reset() and is only raised by finalize().
    """

    BASE_POINTS = 1

    def __init__(self, difficulty_multiplier: float = 1, high_score: int = 0):
        self.difficulty_multiplier = difficulty_multiplier
        self.score = 0
        self.high_score = high_score

    def points_for(self, score_multiplier: float) -> int:
        return int(math.floor(self.BASE_POINTS * score_multiplier * self.difficulty_multiplier))

    def award(self, score_multiplier: float = 1) -> int:
        gained = self.points_for(score_multiplier)
        self.score += gained
        return gained

    def finalize(self) -> int:
        self.high_score = max(self.high_score, self.score)
        return self.high_score

    def reset(self) -> None:
        self.score = 0

    def __repr__(self):
        return f"<Scoreboard score={self.score} high_score={self.high_score}>"
