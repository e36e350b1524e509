"""Bundled sample datasets served alongside the UI."""

from __future__ import annotations

from dataclasses import dataclass

from wxcompare.errors import DatasetKeyError


@dataclass(frozen=True)
class SampleDataSet:
    """Human-readable dataset label and the static JSON path it lives at."""

    location: str
    data: str

    @property
    def location_key(self) -> str:
        """ZIP code when the label starts with one, otherwise the first word."""
        return self.location.split(" ")[0]


SAMPLE_DATA_SETS: tuple[SampleDataSet, ...] = (
    SampleDataSet(location="46220 Indy", data="/46220_IN_home.json"),
    SampleDataSet(location="96740 Honolulu", data="/96740_HI_hot.json"),
    SampleDataSet(location="99701 Anchorage", data="/99701_AK_cold.json"),
    SampleDataSet(location="70601 New Orleans", data="/70601_LA_humid.json"),
    SampleDataSet(location="Mt Washington", data="/MtWash_NH_wind.json"),
)

DEFAULT_SAMPLE_DATA_SET: SampleDataSet = SAMPLE_DATA_SETS[0]


def resolve_sample_dataset(dataset_key: str | None = None) -> SampleDataSet:
    """Look up a dataset by label; no key selects the default dataset."""

    if not dataset_key:
        return DEFAULT_SAMPLE_DATA_SET
    for dataset in SAMPLE_DATA_SETS:
        if dataset.location == dataset_key:
            return dataset
    raise DatasetKeyError(dataset_key)


__all__ = [
    "DEFAULT_SAMPLE_DATA_SET",
    "SAMPLE_DATA_SETS",
    "SampleDataSet",
    "resolve_sample_dataset",
]
