import logging
import sys

from gcs_benchmark.constants import OUTPUT_JSON
from gcs_benchmark.exceptions import BenchmarkError
from gcs_benchmark.main import print_json_results, print_tsv_results, run_benchmark
from gcs_benchmark.parsing import parse_arguments

logger = logging.getLogger(__name__)


async def cli(argv=None):
    """Main entry point for the benchmark tool."""
    # Parse command line arguments
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    benchmark_results = []
    try:
        for repeat in range(args.repeats):
            logger.info(
                "Running %s benchmark, repeat %d/%d", args.mode, repeat + 1, args.repeats
            )
            benchmark_results.extend(await run_benchmark(args))
    except BenchmarkError as e:
        print(f"\nError: {e}")
        sys.exit(1)

    if args.output == OUTPUT_JSON:
        print_json_results(benchmark_results)
    else:
        print_tsv_results(benchmark_results)
