"""
Tests for sample extraction.
"""

from doccat_recommender.models import NO_CATEGORY, AnnotatedDocument, SENTENCE_LAYER
from doccat_recommender.sample_extractor import SampleExtractor

from conftest import CATEGORY_FEATURE, CATEGORY_LAYER


def make_extractor(limit=1000):
    return SampleExtractor(CATEGORY_LAYER, CATEGORY_FEATURE, limit)


class TestSampleExtractor:
    """Test cases for SampleExtractor class."""

    def test_extracts_one_sample_per_annotation(self, make_document):
        """Test each label annotation yields a sample with its sentence's tokens."""
        document = make_document([
            ("sports", ["a", "goal"]),
            ("politics", ["the", "vote"]),
        ])

        samples = make_extractor().extract_samples([document])

        assert [s.category for s in samples] == ["sports", "politics"]
        assert samples[0].tokens == ["a", "goal"]
        assert samples[1].tokens == ["the", "vote"]

    def test_null_label_defaults_to_sentinel(self, make_document):
        """Test annotations without a value resolve to the sentinel and are kept."""
        document = make_document([
            (None, ["unlabeled", "sentence"]),
            ("sports", ["a", "goal"]),
        ])

        samples = make_extractor().extract_samples([document])

        assert len(samples) == 2
        assert samples[0].category == NO_CATEGORY
        assert samples[0].tokens == ["unlabeled", "sentence"]

    def test_multiple_annotations_in_one_sentence(self, make_document):
        """Test two annotations in the same sentence yield two samples."""
        document = make_document([("sports", ["a", "goal"])])
        sentence = document.select(SENTENCE_LAYER)[0]
        document.add_annotation(CATEGORY_LAYER, sentence.begin, sentence.begin + 1,
                                **{CATEGORY_FEATURE: "other"})

        samples = make_extractor().extract_samples([document])

        assert sorted(s.category for s in samples) == ["other", "sports"]
        assert all(s.tokens == ["a", "goal"] for s in samples)

    def test_sentences_without_annotations_are_skipped(self):
        """Test sentences with no label annotation produce no samples."""
        document = AnnotatedDocument.from_sentences([["no", "labels"]])
        assert make_extractor().extract_samples([document]) == []

    def test_limit_is_global_across_documents(self, make_document):
        """Test extraction stops at the limit even in the middle of the document list."""
        documents = [
            make_document([("a", ["one"]), ("b", ["two"])]),
            make_document([("c", ["three"]), ("d", ["four"])]),
            make_document([("e", ["five"])]),
        ]

        samples = make_extractor(limit=3).extract_samples(documents)

        assert [s.category for s in samples] == ["a", "b", "c"]

    def test_limit_never_exceeded(self, make_document):
        """Test sample count stays within the limit for a range of limits."""
        documents = [make_document([(str(i), [f"t{i}"]) for i in range(7)])]

        for limit in range(0, 10):
            samples = make_extractor(limit=limit).extract_samples(documents)
            assert len(samples) == min(limit, 7)

    def test_documents_are_not_modified(self, make_document):
        """Test extraction leaves document annotations unchanged."""
        document = make_document([("sports", ["a", "goal"])])
        layers_before = {layer: len(document.select(layer)) for layer in document.layers()}

        make_extractor().extract_samples([document])

        assert {layer: len(document.select(layer)) for layer in document.layers()} == layers_before
