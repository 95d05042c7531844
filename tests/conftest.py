"""
Shared fixtures for recommender tests.
"""

import pytest

from doccat_recommender.models import AnnotatedDocument, SENTENCE_LAYER


CATEGORY_LAYER = "custom.DocumentCategory"
CATEGORY_FEATURE = "value"

SPORTS_SENTENCES = [
    ["the", "striker", "scored", "a", "goal"],
    ["the", "team", "won", "the", "match"],
    ["a", "late", "goal", "won", "the", "cup"],
    ["the", "keeper", "saved", "the", "penalty"],
    ["fans", "cheered", "the", "team"],
]

POLITICS_SENTENCES = [
    ["the", "senate", "passed", "the", "bill"],
    ["voters", "elected", "a", "new", "mayor"],
    ["the", "minister", "announced", "a", "new", "policy"],
    ["parliament", "debated", "the", "budget"],
    ["the", "party", "won", "the", "election"],
]


def build_document(labeled_sentences, name=None):
    """
    Build a document whose sentences each carry one category annotation.

    Args:
        labeled_sentences: (label, tokens) tuples; a label of None creates
            an annotation without a feature value

    Returns:
        AnnotatedDocument
    """
    document = AnnotatedDocument.from_sentences([tokens for _, tokens in labeled_sentences], name=name)
    for sentence, (label, _) in zip(document.select(SENTENCE_LAYER), labeled_sentences):
        document.add_annotation(CATEGORY_LAYER, sentence.begin, sentence.end, **{CATEGORY_FEATURE: label})
    return document


@pytest.fixture
def make_document():
    """Factory fixture for labeled documents."""
    return build_document


@pytest.fixture
def training_documents():
    """Two documents with sports and politics sentences."""
    return [
        build_document([("sports", tokens) for tokens in SPORTS_SENTENCES], name="sports"),
        build_document([("politics", tokens) for tokens in POLITICS_SENTENCES], name="politics"),
    ]
