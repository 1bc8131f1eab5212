from typing import NamedTuple


class FileSizeClass(NamedTuple):
    name: str
    size_bytes: int
    size_mib: int


class BenchmarkResult(NamedTuple):
    """One benchmark measurement. Every field is already formatted as text."""

    bucket_name: str
    location: str
    file_name: str
    time_taken: str
    file_size_bytes: str
    speed_bps: str
    speed_mibps: str

    def to_dict(self) -> dict[str, str]:
        return {
            "bucketName": self.bucket_name,
            "location": self.location,
            "fileName": self.file_name,
            "timeTaken": self.time_taken,
            "fileSizeBytes": self.file_size_bytes,
            "speedBps": self.speed_bps,
            "speedMiBps": self.speed_mibps,
        }
