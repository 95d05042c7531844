"""
Closable stream over an in-memory list of samples.
"""

from typing import List, Optional

from .models import Sample


class DocumentSampleStream:
    """
    Sequential reader over samples handed to a trainer.

    The stream must be closed after training; use it as a context manager
    so closing happens on every exit path.
    """

    def __init__(self, samples: List[Sample]):
        self._samples = samples
        self._position = 0
        self._closed = False

    def read(self) -> Optional[Sample]:
        """
        Return the next sample.

        Returns:
            Next sample, or None once the stream is exhausted

        Raises:
            OSError: If the stream has been closed
        """
        self._check_open()
        if self._position >= len(self._samples):
            return None
        sample = self._samples[self._position]
        self._position += 1
        return sample

    def reset(self) -> None:
        self._check_open()
        self._position = 0

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise OSError("Sample stream is closed")

    def __enter__(self) -> 'DocumentSampleStream':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
