"""In-memory high score tracking for the lifetime of the process."""

import logging

logger = logging.getLogger(__name__)


class HighScoreTracker:
    """Keeps the best score seen so far. The best score never decreases."""

    def __init__(self, initial: int = 0):
        """
        Initialize the tracker.

        Args:
            initial: Starting best score
        """
        if initial < 0:
            raise ValueError(f"high score must be >= 0, got {initial}")
        self.best = initial

    def record(self, score: int) -> bool:
        """
        Record a finished game's score.

        Args:
            score: The score achieved

        Returns:
            True if this score is a new high score
        """
        if score < 0:
            raise ValueError(f"score must be >= 0, got {score}")

        if score > self.best:
            logger.info("New high score: %d (was %d)", score, self.best)
            self.best = score
            return True
        return False
