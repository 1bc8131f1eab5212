import itertools
from functools import partial

import httpx
import pytest

from gcs_benchmark.timer import TransferTimer

SIGNING_URL = "http://signer.test:3000"
SIGNED_URL = (
    "https://storage.googleapis.com/gcsrbpa-upload-us-west1/2mib.txt-0a1b2c"
    "?X-Goog-Algorithm=GOOG4-RSA-SHA256&X-Goog-Signature=deadbeef"
)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler):
        self.requests = []

        def recording_handler(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


def stepping_clock(step=0.5):
    """Clock advancing by `step` seconds on every call."""
    return partial(next, itertools.count(0.0, step))


@pytest.fixture
def ok_transport():
    return RecordingTransport(lambda request: httpx.Response(200, content=b"\x00" * 1024))


@pytest.fixture
def failing_transport():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    return RecordingTransport(handler)


@pytest.fixture
def signing_transport():
    """Serves signed URLs on the signing host and accepts every PUT."""

    def handler(request):
        if request.url.host == "signer.test":
            return httpx.Response(200, text=SIGNED_URL)
        return httpx.Response(200)

    return RecordingTransport(handler)


@pytest.fixture
def timer_factory():
    def make(transport, clock=None):
        return TransferTimer(transport=transport, clock=clock or stepping_clock())

    return make
