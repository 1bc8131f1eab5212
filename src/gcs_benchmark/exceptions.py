class BenchmarkError(Exception):
    """Base class for errors raised by the benchmark runners."""


class InvalidFileNameError(BenchmarkError, ValueError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(
            f"Invalid File Name: '{file_name}'. "
            'File names must be any of "2mib.txt", "64mib.txt" or "256mib.txt"'
        )


class InvalidBucketNameError(BenchmarkError, ValueError):
    def __init__(self, bucket_name: str):
        self.bucket_name = bucket_name
        super().__init__(
            f"Invalid Bucket Name: '{bucket_name}'. "
            "Bucket must be a supported Google Cloud Storage Region Name. "
            "View https://cloud.google.com/storage/docs/locations for more information."
        )


class SignedUrlError(BenchmarkError, RuntimeError):
    """The signing service could not be reached or refused the request."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Failed to reach server to get signedURL: {cause}")
