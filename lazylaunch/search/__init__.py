"""Query ranking for launch items."""

from .ranking import APPLICATION_BONUS, rank, score_item, subsequence_score

__all__ = ["APPLICATION_BONUS", "rank", "score_item", "subsequence_score"]
