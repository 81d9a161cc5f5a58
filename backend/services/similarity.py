"""TF-IDF similarity between a resume and a job description."""

import logging

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

logger = logging.getLogger(__name__)

# Content score band used by the local ATS estimate
CONTENT_SCORE_FLOOR = 70.0
CONTENT_SCORE_SPAN = 20.0


def tfidf_cosine_similarity(text_a: str, text_b: str) -> float:
    """Compute cosine similarity between two texts using TF-IDF vectors."""
    if not text_a.strip() or not text_b.strip():
        return 0.0

    vectorizer = TfidfVectorizer(
        stop_words="english",
        max_features=5000,
        sublinear_tf=True,
        ngram_range=(1, 2),
    )
    try:
        tfidf_matrix = vectorizer.fit_transform([text_a, text_b])
        score = sklearn_cosine(tfidf_matrix[0:1], tfidf_matrix[1:2])[0][0]
        return float(score)
    except ValueError:
        # Only stop words in one of the texts
        logger.debug("TF-IDF vocabulary empty, similarity is 0")
        return 0.0


def content_quality_score(resume_text: str, job_description: str) -> float:
    """Map lexical similarity onto the 70-90 content score band."""
    similarity = min(1.0, max(0.0, tfidf_cosine_similarity(resume_text, job_description)))
    return CONTENT_SCORE_FLOOR + CONTENT_SCORE_SPAN * similarity
