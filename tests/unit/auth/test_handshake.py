"""Unit tests for the three-legged OAuth token handshake."""

from __future__ import annotations

import pytest

from launchpad.api.auth import (
    OAUTH1_KEY,
    cached_access_token,
    cmdline_access_token,
    exchange_request_token,
    get_access_token,
    get_request_token,
)
from launchpad.api.auth import handshake
from launchpad.api.core import NoEntryError, SecretStoreError, TransportError


class FakeHTTP:
    """Records form posts and replies with canned bodies by URL."""

    def __init__(self, replies: dict[str, str]) -> None:
        self.replies = replies
        self.posts: list[tuple[str, dict[str, str]]] = []
        self.closed = False

    async def post_form(self, url: str, data: dict[str, str]) -> str:
        self.posts.append((url, data))
        if url not in self.replies:
            raise TransportError(f"POST {url} failed with HTTP 401", status_code=401, url=url)
        return self.replies[url]

    async def close(self) -> None:
        self.closed = True

    async def __aenter__(self) -> FakeHTTP:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class FakeStore:
    """In-memory SecretStore."""

    def __init__(self, error: Exception | None = None) -> None:
        self.values: dict[tuple[str, str], str] = {}
        self.error = error

    def get(self, service: str, username: str) -> str:
        if self.error is not None:
            raise self.error
        try:
            return self.values[(service, username)]
        except KeyError:
            raise NoEntryError(f"No entry for {service}", service=service) from None

    def set(self, service: str, username: str, value: str) -> None:
        self.values[(service, username)] = value


HANDSHAKE_REPLIES = {
    "https://launchpad.net/+request-token": "oauth_token=req&oauth_token_secret=req-secret",
    "https://launchpad.net/+access-token": (
        "oauth_token=acc&oauth_token_secret=acc-secret&lp.context=None"
    ),
}


class PromptRecorder:
    def __init__(self) -> None:
        self.urls: list[str] = []

    async def __call__(self, auth_url: str) -> None:
        self.urls.append(auth_url)


class TestHandshakeSteps:
    """Test the individual handshake requests."""

    @pytest.mark.asyncio
    async def test_get_request_token(self):
        http = FakeHTTP(HANDSHAKE_REPLIES)
        assert await get_request_token("just+testing", http=http) == ("req", "req-secret")
        assert http.posts == [
            (
                "https://launchpad.net/+request-token",
                {
                    "oauth_consumer_key": "just+testing",
                    "oauth_signature_method": "PLAINTEXT",
                    "oauth_signature": "&",
                },
            )
        ]

    @pytest.mark.asyncio
    async def test_exchange_request_token(self):
        http = FakeHTTP(HANDSHAKE_REPLIES)
        token = await exchange_request_token(
            "just+testing", "req", request_token_secret="req-secret", http=http
        )
        assert token == ("acc", "acc-secret")
        url, data = http.posts[0]
        assert url == "https://launchpad.net/+access-token"
        assert data["oauth_token"] == "req"
        assert data["oauth_signature"] == "&req-secret"

    @pytest.mark.asyncio
    async def test_instance_selects_host(self):
        http = FakeHTTP(
            {"https://staging.launchpad.net/+request-token": "oauth_token=t&oauth_token_secret=s"}
        )
        assert await get_request_token("app", "staging.launchpad.net", http=http) == ("t", "s")

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        http = FakeHTTP({})
        with pytest.raises(TransportError) as exc_info:
            await get_request_token("app", http=http)
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_creates_and_closes_own_client(self, monkeypatch):
        created: list[FakeHTTP] = []

        def factory() -> FakeHTTP:
            http = FakeHTTP(HANDSHAKE_REPLIES)
            created.append(http)
            return http

        monkeypatch.setattr(handshake, "HTTPClient", factory)
        assert await get_request_token("app") == ("req", "req-secret")
        assert len(created) == 1
        assert created[0].closed


class TestFullHandshake:
    """Test the complete interactive and cached flows."""

    @pytest.mark.asyncio
    async def test_cmdline_access_token(self):
        http = FakeHTTP(HANDSHAKE_REPLIES)
        prompt = PromptRecorder()

        token = await cmdline_access_token("app", prompt=prompt, http=http)

        assert token == ("acc", "acc-secret")
        assert prompt.urls == ["https://launchpad.net/+authorize-token?oauth_token=req"]
        assert [url for url, _ in http.posts] == [
            "https://launchpad.net/+request-token",
            "https://launchpad.net/+access-token",
        ]

    @pytest.mark.asyncio
    async def test_cached_token_skips_handshake(self):
        http = FakeHTTP(HANDSHAKE_REPLIES)
        prompt = PromptRecorder()
        store = FakeStore()
        store.set("launchpad.net", OAUTH1_KEY, "oauth_token=cached&oauth_token_secret=cached-secret")

        token = await cached_access_token("app", "launchpad.net", store, prompt=prompt, http=http)

        assert token == ("cached", "cached-secret")
        assert http.posts == []
        assert prompt.urls == []

    @pytest.mark.asyncio
    async def test_missing_entry_runs_handshake_and_caches(self):
        http = FakeHTTP(HANDSHAKE_REPLIES)
        store = FakeStore()

        token = await get_access_token(
            "app", "launchpad.net", store, prompt=PromptRecorder(), http=http
        )

        assert token == ("acc", "acc-secret")
        assert store.values[("launchpad.net", OAUTH1_KEY)] == (
            "oauth_token=acc&oauth_token_secret=acc-secret"
        )

        # Second run uses the cache
        http.posts.clear()
        assert await get_access_token("app", "launchpad.net", store, http=http) == token
        assert http.posts == []

    @pytest.mark.asyncio
    async def test_other_store_errors_propagate(self):
        http = FakeHTTP(HANDSHAKE_REPLIES)
        store = FakeStore(error=SecretStoreError("locked", service="launchpad.net"))

        with pytest.raises(SecretStoreError) as exc_info:
            await cached_access_token("app", "launchpad.net", store, prompt=PromptRecorder(), http=http)
        assert not isinstance(exc_info.value, NoEntryError)
        assert http.posts == []

    @pytest.mark.asyncio
    async def test_without_store_always_prompts(self):
        http = FakeHTTP(HANDSHAKE_REPLIES)
        prompt = PromptRecorder()

        assert await get_access_token("app", prompt=prompt, http=http) == ("acc", "acc-secret")
        assert len(prompt.urls) == 1
