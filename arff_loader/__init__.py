"""ARFF file loading into typed streams and batches.

Typical use::

    from arff_loader import load

    batch = load("iris.arff", batch=True)
    species = batch.headers[4]
    print(batch.num_rows, batch.get_value(species.canonical, 0))
"""

from .arff.errors import ArffError
from .arff.reader import load
from .models.dataset import Batch, Stream

__all__ = [
    "ArffError",
    "Batch",
    "Stream",
    "load",
]

__version__ = "0.1.0"
