import os
from types import MappingProxyType

from gcs_benchmark.structs import FileSizeClass

# Storage endpoints
STORAGE_HOST = os.getenv("GCS_BENCHMARK_STORAGE_HOST", "https://storage.googleapis.com")
SIGNING_URL = os.getenv("GCS_BENCHMARK_SIGNING_URL", "http://localhost:3000")

# Bucket naming
DOWNLOAD_BUCKET_PREFIX = "gcsrbpa-"
UPLOAD_BUCKET_PREFIX = "gcsrbpa-upload-"

# Sentinels and formatting
DEFAULT_TIME_TAKEN = -1  # milliseconds, reported when a transfer fails
FLOAT_ROUND_DIGITS = 3
SIGNED_URL_EXPIRATION = 15 * 60  # seconds, enforced by the signing service

MIB = 1024 * 1024

# Operation modes
MODE_DOWNLOAD = "download"
MODE_UPLOAD = "upload"

# Output formats
OUTPUT_TSV = "tsv"
OUTPUT_JSON = "json"

# Supported single-region locations, see https://cloud.google.com/storage/docs/locations
REGIONS = MappingProxyType(
    {
        "northamerica-northeast1": "Montréal",
        "northamerica-northeast2": "Toronto",
        "us-central1": "Iowa",
        "us-east1": "South Carolina",
        "us-east4": "Northern Virginia",
        "us-east5": "Columbus",
        "us-south1": "Dallas",
        "us-west1": "Oregon",
        "us-west2": "Los Angeles",
        "us-west3": "Salt Lake City",
        "us-west4": "Las Vegas",
        "southamerica-east1": "São Paulo",
        "southamerica-west1": "Santiago",
        "europe-central2": "Warsaw",
        "europe-north1": "Finland",
        "europe-southwest1": "Madrid",
        "europe-west1": "Belgium",
        "europe-west2": "London",
        "europe-west3": "Frankfurt",
        "europe-west4": "Netherlands",
        "europe-west6": "Zürich",
        "europe-west8": "Milan",
        "europe-west9": "Paris",
        "asia-east1": "Taiwan",
        "asia-east2": "Hong Kong",
        "asia-northeast1": "Tokyo",
        "asia-northeast2": "Osaka",
        "asia-northeast3": "Seoul",
        "asia-south1": "Mumbai",
        "asia-south2": "Delhi",
        "asia-southeast1": "Singapore",
        "asia-southeast2": "Jakarta",
        "australia-southeast1": "Sydney",
        "australia-southeast2": "Melbourne",
    }
)

# Objects stored in every download bucket
FILE_NAME_SMALL = "2mib.txt"
FILE_NAME_MEDIUM = "64mib.txt"
FILE_NAME_LARGE = "256mib.txt"

FILE_SIZES = MappingProxyType(
    {
        name: FileSizeClass(name=name, size_bytes=size_mib * MIB, size_mib=size_mib)
        for name, size_mib in (
            (FILE_NAME_SMALL, 2),
            (FILE_NAME_MEDIUM, 64),
            (FILE_NAME_LARGE, 256),
        )
    }
)

# Base64 MD5 of the all-zero upload payload for each file size
MD5_SUMS = MappingProxyType(
    {
        FILE_NAME_SMALL: "stEjbChqPAcEIk/kEF7KSQ==",
        FILE_NAME_MEDIUM: "f2FNqTKc066/WbkarcML8A==",
        FILE_NAME_LARGE: "H1A55QvWaykMVmhNhVDGwg==",
    }
)
