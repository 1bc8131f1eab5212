import json
import math
from collections.abc import Iterable
from functools import lru_cache

from gcs_benchmark.constants import DEFAULT_TIME_TAKEN, FLOAT_ROUND_DIGITS
from gcs_benchmark.registry import lookup_file_size, lookup_location
from gcs_benchmark.structs import BenchmarkResult


@lru_cache
def generate_content(size: int) -> bytes:
    """
    Generate the payload uploaded during an upload benchmark.

    Args:
        size: Payload size in bytes

    Returns:
        Bytes object of `size` zero bytes
    """
    return b"\x00" * size


def to_seconds(time_taken_ms: float) -> float:
    """Convert milliseconds to seconds. The -1 ms sentinel becomes -0.001 s."""
    return time_taken_ms / 1000


def compute_speed(size: int | None, seconds: float) -> float:
    """
    Compute a transfer speed.

    Args:
        size: Payload size in any unit, None if unknown
        seconds: Elapsed time in seconds, negative if the transfer failed

    Returns:
        size per second; DEFAULT_TIME_TAKEN if the size is unknown,
        positive infinity if no measurable time elapsed
    """
    if size is None:
        return float(DEFAULT_TIME_TAKEN)
    if seconds == 0:
        return math.inf
    return size / seconds


def format_fixed(value: float) -> str:
    """Format a number with FLOAT_ROUND_DIGITS decimals, spelling out infinities."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.{FLOAT_ROUND_DIGITS}f}"


def build_result(region: str, file_name: str, seconds: float) -> BenchmarkResult:
    """
    Assemble a benchmark result from a raw timing.

    Unknown regions and file names do not raise: the location falls back to
    the region identifier, the size falls back to the file name and both
    speeds to DEFAULT_TIME_TAKEN.

    Args:
        region: Region identifier the bucket lives in
        file_name: Name of the transferred file
        seconds: Elapsed time in seconds, -0.001 on failure

    Returns:
        BenchmarkResult with all numbers formatted as text
    """
    size = lookup_file_size(file_name)
    location = lookup_location(region)

    if size is None:
        file_size_bytes = file_name
        speed_bps = compute_speed(None, seconds)
        speed_mibps = compute_speed(None, seconds)
    else:
        file_size_bytes = str(size.size_bytes)
        speed_bps = compute_speed(size.size_bytes, seconds)
        speed_mibps = compute_speed(size.size_mib, seconds)

    return BenchmarkResult(
        bucket_name=region,
        location=location if location is not None else region,
        file_name=file_name,
        time_taken=format_fixed(seconds),
        file_size_bytes=file_size_bytes,
        speed_bps=format_fixed(speed_bps),
        speed_mibps=format_fixed(speed_mibps),
    )


def results_to_json(results: Iterable[BenchmarkResult]) -> str:
    """Serialize results as a JSON array of result objects."""
    return json.dumps([result.to_dict() for result in results], ensure_ascii=False)


def format_size(size: int) -> str:
    """
    Format size in bytes to human-readable format.

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    units = ["B", "KiB", "MiB", "GiB", "TiB"]
    unit_index = 0

    while size >= 1024 and unit_index < len(units) - 1:
        size /= 1024
        unit_index += 1

    return f"{size:.2f} {units[unit_index]}"
