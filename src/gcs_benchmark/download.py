import logging
from collections.abc import Iterable

from gcs_benchmark.constants import DOWNLOAD_BUCKET_PREFIX, REGIONS, STORAGE_HOST
from gcs_benchmark.registry import validate_file_name, validate_region
from gcs_benchmark.structs import BenchmarkResult
from gcs_benchmark.timer import TransferTimer
from gcs_benchmark.utils import build_result, to_seconds

logger = logging.getLogger(__name__)


class Downloads:
    """Measure the time to download benchmark files from public regional buckets."""

    def __init__(
        self, timer: TransferTimer | None = None, storage_host: str = STORAGE_HOST
    ):
        """
        Args:
            timer: TransferTimer used for the GET requests
            storage_host: Scheme and host serving the buckets
        """
        self.timer = timer if timer is not None else TransferTimer()
        self.storage_host = storage_host.rstrip("/")

    def build_url(self, file_name: str, region: str) -> str:
        """
        Build the public URL of a benchmark file, e.g.
        https://storage.googleapis.com/gcsrbpa-asia-southeast2/256mib.txt
        """
        return f"{self.storage_host}/{DOWNLOAD_BUCKET_PREFIX}{region}/{file_name}"

    async def time_download(self, file_name: str, region: str) -> float:
        """
        Download one file and measure how long it took.

        Args:
            file_name: One of the benchmark file names
            region: Region identifier of the bucket

        Returns:
            Elapsed time in seconds, -0.001 if the download failed

        Raises:
            InvalidFileNameError: If file_name is not a benchmark file
            InvalidBucketNameError: If region is not a supported region
        """
        validate_file_name(file_name)
        validate_region(region)

        time_taken_ms = await self.timer.time_get(self.build_url(file_name, region))
        return to_seconds(time_taken_ms)

    async def benchmark_single_download(
        self, file_name: str, region: str
    ) -> BenchmarkResult:
        """Run one download benchmark against the bucket in `region`."""
        time_taken = await self.time_download(file_name, region)
        result = build_result(region, file_name, time_taken)
        logger.debug("Download result: %s", result.to_dict())
        return result

    async def benchmark_all_downloads(
        self, file_name: str, regions: Iterable[str] | None = None
    ) -> list[BenchmarkResult]:
        """
        Run download benchmarks against every region, one after the other.

        Args:
            file_name: One of the benchmark file names
            regions: Regions to benchmark, all supported regions by default

        Returns:
            One result per region, in iteration order
        """
        logger.info("Beginning download benchmarks for %s", file_name)

        results = []
        for region in regions if regions is not None else REGIONS:
            results.append(await self.benchmark_single_download(file_name, region))
            logger.info("Completed download benchmark for %s", region)

        return results
