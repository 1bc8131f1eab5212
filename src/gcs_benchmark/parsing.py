import argparse

from gcs_benchmark.constants import (
    FILE_NAME_SMALL,
    FILE_SIZES,
    MODE_DOWNLOAD,
    MODE_UPLOAD,
    OUTPUT_JSON,
    OUTPUT_TSV,
    REGIONS,
    SIGNING_URL,
    STORAGE_HOST,
)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Benchmark Google Cloud Storage transfer speeds across regions."
    )

    # Mode selection
    parser.add_argument(
        "mode",
        choices=[MODE_DOWNLOAD, MODE_UPLOAD],
        help="Operation mode: download or upload",
    )

    parser.add_argument(
        "--file-name",
        default=FILE_NAME_SMALL,
        choices=list(FILE_SIZES),
        help=f"Benchmark file to transfer (default: {FILE_NAME_SMALL})",
    )

    parser.add_argument(
        "--region",
        dest="regions",
        nargs="+",
        help="Regions to benchmark (e.g. 'us-west1 europe-west2'). Default: all supported regions",
    )

    parser.add_argument(
        "--repeats",
        type=int,
        default=1,
        help="Number of times to repeat the benchmark (default: 1)",
    )

    parser.add_argument(
        "--output",
        choices=[OUTPUT_TSV, OUTPUT_JSON],
        default=OUTPUT_TSV,
        help="Result output format (default: tsv)",
    )

    # Download mode arguments
    download_group = parser.add_argument_group("Download mode arguments")
    download_group.add_argument(
        "--storage-host",
        default=STORAGE_HOST,
        help=f"Scheme and host serving the buckets (default: {STORAGE_HOST})",
    )

    # Upload mode arguments
    upload_group = parser.add_argument_group("Upload mode arguments")
    upload_group.add_argument(
        "--signing-url",
        default=SIGNING_URL,
        help=f"Base URL of the signed URL service (default: {SIGNING_URL})",
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug output")

    args = parser.parse_args(argv)

    if args.repeats < 1:
        parser.error("--repeats must be at least 1")

    if args.regions:
        unknown = [region for region in args.regions if region not in REGIONS]
        if unknown:
            parser.error(f"unsupported region(s): {', '.join(unknown)}")

    return args
