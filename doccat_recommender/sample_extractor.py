"""
Extraction of labeled samples from annotated documents.
"""

import logging
from typing import List

from .models import NO_CATEGORY, SENTENCE_LAYER, TOKEN_LAYER, AnnotatedDocument, Sample


logger = logging.getLogger(__name__)


class SampleExtractor:
    """
    Turns label annotations into training samples.

    Every annotation of the target layer inside a sentence yields one sample
    made of the sentence's tokens and the annotation's feature value. The
    number of samples is capped across all documents.
    """

    def __init__(self, layer_name: str, feature_name: str, training_set_size_limit: int):
        self.layer_name = layer_name
        self.feature_name = feature_name
        self.training_set_size_limit = training_set_size_limit

    def extract_samples(self, documents: List[AnnotatedDocument]) -> List[Sample]:
        """
        Extract samples from documents in order, stopping at the size limit.

        Args:
            documents: Annotated documents to read from

        Returns:
            Samples, at most training_set_size_limit of them
        """
        samples: List[Sample] = []
        for document in documents:
            sentences = document.index_covered(SENTENCE_LAYER, TOKEN_LAYER)
            for sentence, tokens in sentences.items():
                token_texts = [document.covered_text(token) for token in tokens]

                for annotation in document.select_covered(self.layer_name, sentence):
                    if len(samples) >= self.training_set_size_limit:
                        logger.debug(
                            f"Training set size limit of {self.training_set_size_limit} reached"
                        )
                        return samples

                    label = document.feature_value_as_string(annotation, self.feature_name)
                    sample = Sample(
                        category=label if label is not None else NO_CATEGORY,
                        tokens=token_texts
                    )
                    # Unreachable while null labels fall back to NO_CATEGORY
                    if sample.category is not None:
                        samples.append(sample)

        return samples
