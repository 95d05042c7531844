"""
In-memory annotated document.

Holds the document text and an index of span annotations by layer name.
Provides the read queries the recommender needs (select by layer, select
covered by a span, feature lookup) and the single write operation used for
predictions (create an annotation and add it to the index).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import InvalidInputError


SENTENCE_LAYER = "Sentence"
TOKEN_LAYER = "Token"
PREDICTION_LAYER = "PredictedSpan"

# Feature names of prediction annotations
LABEL_FEATURE = "label"
SCORE_FEATURE = "score"


@dataclass(eq=False)
class Annotation:
    """A span annotation on a document layer."""
    layer: str
    begin: int
    end: int
    features: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate annotation span after initialization."""
        if self.begin < 0 or self.end < self.begin:
            raise ValueError(f"Invalid annotation span [{self.begin}, {self.end})")

    def covers(self, other: 'Annotation') -> bool:
        return self.begin <= other.begin and other.end <= self.end


class AnnotatedDocument:
    """Document text plus its annotation index."""

    def __init__(self, text: str, name: Optional[str] = None):
        if text is None:
            raise InvalidInputError("Document text cannot be None")
        self.text = text
        self.name = name
        self._index: Dict[str, List[Annotation]] = {}

    @classmethod
    def from_sentences(
        cls,
        sentences: Sequence[Sequence[str]],
        name: Optional[str] = None
    ) -> 'AnnotatedDocument':
        """
        Build a document from pre-tokenized sentences.

        Tokens are joined with single spaces and sentences with newlines;
        sentence and token annotations are created for every entry.

        Args:
            sentences: Sentences, each given as a sequence of token strings
            name: Optional document name

        Returns:
            AnnotatedDocument with sentence and token layers filled in
        """
        parts: List[str] = []
        spans: List[Tuple[int, int, List[Tuple[int, int]]]] = []
        offset = 0
        for sentence_tokens in sentences:
            token_spans = []
            sentence_begin = offset
            for i, token in enumerate(sentence_tokens):
                if not token:
                    raise InvalidInputError("Tokens cannot be empty strings")
                if i > 0:
                    parts.append(" ")
                    offset += 1
                token_spans.append((offset, offset + len(token)))
                parts.append(token)
                offset += len(token)
            spans.append((sentence_begin, offset, token_spans))
            parts.append("\n")
            offset += 1

        document = cls("".join(parts), name=name)
        for sentence_begin, sentence_end, token_spans in spans:
            document.add_annotation(SENTENCE_LAYER, sentence_begin, sentence_end)
            for token_begin, token_end in token_spans:
                document.add_annotation(TOKEN_LAYER, token_begin, token_end)
        return document

    def create_annotation(self, layer: str, begin: int, end: int, **features: Any) -> Annotation:
        """Create an annotation on this document without indexing it."""
        if end > len(self.text):
            raise InvalidInputError(
                f"Annotation end {end} exceeds document length {len(self.text)}"
            )
        return Annotation(layer=layer, begin=begin, end=end, features=dict(features))

    def add_to_indexes(self, annotation: Annotation) -> None:
        self._index.setdefault(annotation.layer, []).append(annotation)

    def add_annotation(self, layer: str, begin: int, end: int, **features: Any) -> Annotation:
        """Create an annotation and add it to the index."""
        annotation = self.create_annotation(layer, begin, end, **features)
        self.add_to_indexes(annotation)
        return annotation

    def select(self, layer: str) -> List[Annotation]:
        """All annotations of a layer in document order."""
        annotations = self._index.get(layer, [])
        return sorted(annotations, key=lambda a: (a.begin, -a.end))

    def select_covered(self, layer: str, covering: Annotation) -> List[Annotation]:
        """Annotations of a layer lying within the span of the covering annotation."""
        return [a for a in self.select(layer) if covering.covers(a)]

    def index_covered(self, covering_layer: str, covered_layer: str) -> Dict[Annotation, List[Annotation]]:
        """Map every annotation of the covering layer to the annotations it covers."""
        return {
            covering: self.select_covered(covered_layer, covering)
            for covering in self.select(covering_layer)
        }

    def covered_text(self, annotation: Annotation) -> str:
        return self.text[annotation.begin:annotation.end]

    def feature_value_as_string(self, annotation: Annotation, feature_name: str) -> Optional[str]:
        """Feature value of an annotation as a string, or None if it is unset."""
        value = annotation.features.get(feature_name)
        return None if value is None else str(value)

    def layers(self) -> Iterable[str]:
        return list(self._index.keys())

    def __repr__(self) -> str:
        counts = {layer: len(items) for layer, items in self._index.items()}
        return f"AnnotatedDocument(name={self.name!r}, length={len(self.text)}, layers={counts})"
