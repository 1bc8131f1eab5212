#!/usr/bin/env python3
"""
GCS Region Benchmark

Measures download and upload throughput against Google Cloud Storage buckets
in every single-region location, one region at a time.
"""

import logging

from gcs_benchmark.constants import MODE_DOWNLOAD
from gcs_benchmark.download import Downloads
from gcs_benchmark.structs import BenchmarkResult
from gcs_benchmark.timer import TransferTimer
from gcs_benchmark.upload import SignedUrlClient, Uploads
from gcs_benchmark.utils import results_to_json

logger = logging.getLogger(__name__)


async def run_download_benchmark(
    file_name, regions, storage_host, timer=None
) -> list[BenchmarkResult]:
    """
    Run download benchmarks for one file across regions.

    Args:
        file_name: Benchmark file to download
        regions: Region identifiers, None for every supported region
        storage_host: Scheme and host serving the buckets
        timer: Optional TransferTimer

    Returns:
        List of benchmark results
    """
    downloads = Downloads(timer=timer, storage_host=storage_host)
    return await downloads.benchmark_all_downloads(file_name, regions)


async def run_upload_benchmark(
    file_name, regions, signing_url, timer=None
) -> list[BenchmarkResult]:
    """
    Run upload benchmarks for one file across regions.

    Args:
        file_name: Benchmark file to upload
        regions: Region identifiers, None for every supported region
        signing_url: Base URL of the signed URL service
        timer: Optional TransferTimer

    Returns:
        List of benchmark results
    """
    uploads = Uploads(timer=timer, signing_client=SignedUrlClient(signing_url))
    return await uploads.benchmark_all_uploads(file_name, regions)


async def run_benchmark(args, timer: TransferTimer | None = None) -> list[BenchmarkResult]:
    """Dispatch to the download or upload benchmark according to parsed arguments."""
    if args.mode == MODE_DOWNLOAD:
        return await run_download_benchmark(
            args.file_name, args.regions, args.storage_host, timer
        )
    return await run_upload_benchmark(
        args.file_name, args.regions, args.signing_url, timer
    )


def print_tsv_results(benchmark_results):
    """
    Print benchmark results as a TSV table.

    Args:
        benchmark_results: List of BenchmarkResult
    """
    print("\nBenchmark Results (TSV format):")
    print("Region\tLocation\tFile\tTime (s)\tSize (bytes)\tSpeed (B/s)\tSpeed (MiB/s)")

    for result in benchmark_results:
        print("\t".join(result))


def print_json_results(benchmark_results):
    """Print benchmark results as a JSON array of result objects."""
    print(results_to_json(benchmark_results))
