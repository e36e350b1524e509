"""Domain constants for the weather comparison store."""

from .samples import (
    DEFAULT_SAMPLE_DATA_SET,
    SAMPLE_DATA_SETS,
    SampleDataSet,
    resolve_sample_dataset,
)

__all__ = [
    "DEFAULT_SAMPLE_DATA_SET",
    "SAMPLE_DATA_SETS",
    "SampleDataSet",
    "resolve_sample_dataset",
]
