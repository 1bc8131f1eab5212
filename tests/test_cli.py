import importlib
import json

import pytest
from conftest import SIGNING_URL

from gcs_benchmark.cli import cli
from gcs_benchmark.constants import SIGNING_URL as DEFAULT_SIGNING_URL
from gcs_benchmark.constants import STORAGE_HOST
from gcs_benchmark.exceptions import SignedUrlError
from gcs_benchmark.main import print_tsv_results, run_benchmark
from gcs_benchmark.parsing import parse_arguments
from gcs_benchmark.utils import build_result

cli_module = importlib.import_module("gcs_benchmark.cli")


def test_parse_arguments_defaults():
    args = parse_arguments(["download"])

    assert args.mode == "download"
    assert args.file_name == "2mib.txt"
    assert args.regions is None
    assert args.repeats == 1
    assert args.output == "tsv"
    assert args.storage_host == STORAGE_HOST
    assert args.signing_url == DEFAULT_SIGNING_URL


def test_parse_arguments_regions():
    args = parse_arguments(
        ["upload", "--file-name", "64mib.txt", "--region", "us-west1", "us-east1"]
    )

    assert args.file_name == "64mib.txt"
    assert args.regions == ["us-west1", "us-east1"]


@pytest.mark.parametrize(
    "argv",
    [
        ["download", "--region", "random_bucket_name"],
        ["download", "--file-name", "random_file_name"],
        ["download", "--repeats", "0"],
        ["sideways"],
    ],
)
def test_parse_arguments_rejects_bad_input(argv):
    with pytest.raises(SystemExit):
        parse_arguments(argv)


def test_print_tsv_results(capsys):
    print_tsv_results([build_result("us-west1", "2mib.txt", 0.5)])

    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[-1] == "us-west1\tOregon\t2mib.txt\t0.500\t2097152\t4194304.000\t4.000"


@pytest.mark.asyncio
async def test_run_benchmark_download(ok_transport, timer_factory):
    args = parse_arguments(["download", "--region", "europe-west1"])

    results = await run_benchmark(args, timer=timer_factory(ok_transport))

    assert [result.location for result in results] == ["Belgium"]
    assert str(ok_transport.requests[0].url) == (
        "https://storage.googleapis.com/gcsrbpa-europe-west1/2mib.txt"
    )


@pytest.mark.asyncio
async def test_cli_prints_json(monkeypatch, capsys):
    calls = []

    async def fake_run_benchmark(args):
        calls.append(args.regions)
        return [build_result(region, args.file_name, 0) for region in args.regions]

    monkeypatch.setattr(cli_module, "run_benchmark", fake_run_benchmark)

    await cli(["download", "--region", "asia-east1", "--repeats", "2", "--output", "json"])

    assert calls == [["asia-east1"], ["asia-east1"]]
    rows = json.loads(capsys.readouterr().out)
    assert len(rows) == 2
    assert rows[0]["location"] == "Taiwan"
    assert rows[0]["speedMiBps"] == "Infinity"


@pytest.mark.asyncio
async def test_cli_exits_on_signing_failure(monkeypatch, capsys):
    async def fake_run_benchmark(args):
        raise SignedUrlError(ConnectionError("refused"))

    monkeypatch.setattr(cli_module, "run_benchmark", fake_run_benchmark)

    with pytest.raises(SystemExit) as exc_info:
        await cli(["upload", "--signing-url", SIGNING_URL])

    assert exc_info.value.code == 1
    assert "Failed to reach server to get signedURL: refused" in capsys.readouterr().out

