from typing import Callable, List

import httpx
import pytest

from elevenlabs_speech.client import SpeechClient


@pytest.fixture
def sent() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(sent: List[httpx.Request]) -> Callable[..., SpeechClient]:
    """
    Client factory wired to an in-memory transport that records requests.
    """

    def factory(response: httpx.Response, api_key: str = "test-key", **kwargs) -> SpeechClient:
        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return response

        return SpeechClient(api_key, transport=httpx.MockTransport(handler), **kwargs)

    return factory
