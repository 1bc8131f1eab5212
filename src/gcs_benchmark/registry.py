"""Lookups and validation against the region and file-size registries."""

from gcs_benchmark.constants import FILE_SIZES, REGIONS
from gcs_benchmark.exceptions import InvalidBucketNameError, InvalidFileNameError
from gcs_benchmark.structs import FileSizeClass


def lookup_location(region: str) -> str | None:
    """Return the display name of a region, or None if it is not supported."""
    return REGIONS.get(region)


def lookup_file_size(file_name: str) -> FileSizeClass | None:
    """Return the size class of a benchmark file, or None if it is not known."""
    return FILE_SIZES.get(file_name)


def validate_file_name(file_name: str) -> FileSizeClass:
    size = lookup_file_size(file_name)
    if size is None:
        raise InvalidFileNameError(file_name)
    return size


def validate_region(region: str) -> str:
    location = lookup_location(region)
    if location is None:
        raise InvalidBucketNameError(region)
    return location
