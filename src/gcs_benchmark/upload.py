import logging
from collections.abc import Iterable

import httpx

from gcs_benchmark.constants import MD5_SUMS, REGIONS, SIGNING_URL, UPLOAD_BUCKET_PREFIX
from gcs_benchmark.exceptions import SignedUrlError
from gcs_benchmark.registry import validate_file_name, validate_region
from gcs_benchmark.structs import BenchmarkResult
from gcs_benchmark.timer import TransferTimer
from gcs_benchmark.utils import build_result, format_size, generate_content, to_seconds

logger = logging.getLogger(__name__)


class SignedUrlClient:
    """Fetch upload URLs from the signing service."""

    def __init__(
        self,
        signing_url: str = SIGNING_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            signing_url: Scheme, host and port of the signing service
            transport: Optional httpx transport, used instead of the network
        """
        self.signing_url = signing_url.rstrip("/")
        self.transport = transport

    async def get_signed_url(self, file_name: str, bucket_name: str) -> str:
        """
        Request a signed URL allowing a single PUT of `file_name` to `bucket_name`.

        The service answers with the bare URL as the response body.

        Raises:
            SignedUrlError: If the service is unreachable or answers with an error
        """
        source = f"{self.signing_url}/{bucket_name}/{file_name}"

        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.get(source)
                response.raise_for_status()
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise SignedUrlError(exc) from exc

        return response.text


class Uploads:
    """Measure the time to upload benchmark files to private regional buckets."""

    def __init__(
        self,
        timer: TransferTimer | None = None,
        signing_client: SignedUrlClient | None = None,
    ):
        self.timer = timer if timer is not None else TransferTimer()
        self.signing_client = (
            signing_client if signing_client is not None else SignedUrlClient()
        )

    @staticmethod
    def build_bucket_name(region: str) -> str:
        return f"{UPLOAD_BUCKET_PREFIX}{region}"

    @staticmethod
    def build_headers(file_name: str) -> dict[str, str]:
        """
        Headers for the PUT request. The signed URL only accepts a body of
        exactly the declared size with a matching checksum.
        """
        size_bytes = validate_file_name(file_name).size_bytes
        return {
            "Content-Type": "text/plain",
            "Content-Md5": MD5_SUMS[file_name],
            "x-goog-content-length-range": f"{size_bytes},{size_bytes}",
        }

    async def get_duration_of_upload(self, file_name: str, region: str) -> float:
        """
        Upload one file from memory and measure how long it took.

        Args:
            file_name: One of the benchmark file names
            region: Region identifier of the bucket

        Returns:
            Elapsed time in seconds, -0.001 if the PUT request failed

        Raises:
            InvalidFileNameError: If file_name is not a benchmark file
            InvalidBucketNameError: If region is not a supported region
            SignedUrlError: If no signed URL could be obtained
        """
        size = validate_file_name(file_name)
        validate_region(region)

        bucket_name = self.build_bucket_name(region)
        url = await self.signing_client.get_signed_url(file_name, bucket_name)

        logger.debug("Uploading %s to %s", format_size(size.size_bytes), bucket_name)
        time_taken_ms = await self.timer.time_put(
            url, generate_content(size.size_bytes), self.build_headers(file_name)
        )
        return to_seconds(time_taken_ms)

    async def benchmark_single_upload(
        self, file_name: str, region: str
    ) -> BenchmarkResult:
        """Run one upload benchmark against the bucket in `region`."""
        time_taken = await self.get_duration_of_upload(file_name, region)
        result = build_result(region, file_name, time_taken)
        logger.debug("Upload result: %s", result.to_dict())
        return result

    async def benchmark_all_uploads(
        self, file_name: str, regions: Iterable[str] | None = None
    ) -> list[BenchmarkResult]:
        """
        Run upload benchmarks against every region, one after the other.

        A failed upload shows up as a result with negative values. A failure
        to obtain a signed URL aborts the whole run.
        """
        logger.info("Beginning upload benchmarks for %s", file_name)

        results = []
        for region in regions if regions is not None else REGIONS:
            results.append(await self.benchmark_single_upload(file_name, region))
            logger.info("Completed upload benchmark for %s", region)

        return results
