"""Sequential cursor over in-memory sequences."""

from slicereader.errors import EndOfSequence
from slicereader.models import Batch
from slicereader.reader import Predicate, SliceReader

__version__ = "0.1.0"

__all__ = ["Batch", "EndOfSequence", "Predicate", "SliceReader"]
