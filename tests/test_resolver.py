"""Resolver fallback tests."""

import asyncio

import aiohttp
import pytest

from tiksave.core.errors import EndpointSoftFailure, ErrorCode
from tiksave.services.resolver import (
    DEFAULT_ENDPOINTS,
    ResolutionFailure,
    ResolverService,
    ResponseShape,
)

from helpers import VIDEO_LINK, called_hosts, make_http


@pytest.mark.asyncio
@pytest.mark.parametrize("link", ["", "   ", "not a link", "https://www.youtube.com/watch?v=1"])
async def test_invalid_link_makes_no_network_call(endpoints, link):
    """Rejected input never reaches an endpoint."""
    http = make_http({})
    resolver = ResolverService(endpoints=endpoints, http=http)

    result = await resolver.resolve(link)

    assert not result.success
    assert result.failure is ResolutionFailure.INVALID_LINK
    assert result.failure.code is ErrorCode.INVALID_LINK
    assert result.attempts == []
    http.get_json.assert_not_called()


@pytest.mark.asyncio
async def test_falls_through_to_first_usable_endpoint(endpoints, nested_payload, flat_payload):
    """E1 fails, E2 answers with the nested shape, E3 is never called."""
    http = make_http({
        "e1.test": asyncio.TimeoutError(),
        "e2.test": nested_payload,
        "e3.test": flat_payload,
    })
    resolver = ResolverService(endpoints=endpoints, http=http)

    result = await resolver.resolve(VIDEO_LINK)

    assert result.success
    assert result.failure is None
    assert result.metadata.source == "e2"
    assert result.metadata.title == "Cat plays piano"
    assert result.metadata.link == VIDEO_LINK
    assert called_hosts(http) == ["e1.test", "e2.test"]
    assert [a.endpoint for a in result.attempts] == ["e1", "e2"]
    assert [a.success for a in result.attempts] == [False, True]
    assert result.attempts[0].error == "Timed out after 1s"


@pytest.mark.asyncio
async def test_first_endpoint_wins_immediately(endpoints, flat_payload):
    http = make_http({"e1.test": flat_payload})
    resolver = ResolverService(endpoints=endpoints, http=http)

    result = await resolver.resolve(VIDEO_LINK)

    assert result.metadata.source == "e1"
    assert called_hosts(http) == ["e1.test"]


@pytest.mark.asyncio
async def test_all_endpoints_failing(endpoints):
    """Timeouts, bad statuses and network errors exhaust every source."""
    http = make_http({
        "e1.test": asyncio.TimeoutError(),
        "e2.test": EndpointSoftFailure("HTTP 503", status=503),
        "e3.test": aiohttp.ClientConnectionError("connection refused"),
    })
    resolver = ResolverService(endpoints=endpoints, http=http)

    result = await resolver.resolve(VIDEO_LINK)

    assert not result.success
    assert result.metadata is None
    assert result.failure is ResolutionFailure.ALL_SOURCES_EXHAUSTED
    assert called_hosts(http) == ["e1.test", "e2.test", "e3.test"]
    assert result.attempts[1].error == "HTTP 503"
    assert result.attempts[2].error.startswith("ClientConnectionError")


@pytest.mark.asyncio
async def test_unusable_payloads_are_soft_failures(endpoints, flat_payload):
    """Missing source URL or wrong shape moves on to the next endpoint."""
    http = make_http({
        "e1.test": {"title": "no play url"},
        "e2.test": flat_payload,  # flat body at a nested endpoint
        "e3.test": flat_payload,
    })
    resolver = ResolverService(endpoints=endpoints, http=http)

    result = await resolver.resolve(VIDEO_LINK)

    assert result.metadata.source == "e3"
    assert result.attempts[0].error == "No playable source URL in response"


@pytest.mark.asyncio
async def test_unexpected_errors_do_not_abort(endpoints, flat_payload):
    http = make_http({
        "e1.test": RuntimeError("adapter exploded"),
        "e2.test": flat_payload,
        "e3.test": flat_payload,
    })
    resolver = ResolverService(endpoints=endpoints, http=http)

    result = await resolver.resolve(VIDEO_LINK)

    assert result.metadata.source == "e3"
    assert result.attempts[0].error == "RuntimeError: adapter exploded"


@pytest.mark.asyncio
async def test_request_carries_encoded_link_and_own_timeout(endpoints):
    http = make_http({
        "e1.test": asyncio.TimeoutError(),
        "e2.test": asyncio.TimeoutError(),
        "e3.test": asyncio.TimeoutError(),
    })
    resolver = ResolverService(endpoints=endpoints, http=http)

    await resolver.resolve("  https://vm.tiktok.com/ZMabc/ ")

    first = http.get_json.call_args_list[0]
    assert first.args[0] == "https://e1.test/api?url=https%3A%2F%2Fvm.tiktok.com%2FZMabc%2F"
    timeouts = [call.kwargs["timeout"] for call in http.get_json.call_args_list]
    assert timeouts == [1, 2, 3]


@pytest.mark.asyncio
async def test_no_endpoints_configured():
    resolver = ResolverService(endpoints=[], http=make_http({}))

    result = await resolver.resolve(VIDEO_LINK)

    assert result.failure is ResolutionFailure.ALL_SOURCES_EXHAUSTED


def test_default_endpoint_order():
    """Priority list and shapes of the shipped endpoints."""
    assert [e.name for e in DEFAULT_ENDPOINTS] == ["tiklydown", "tikwm", "tikcdn"]
    assert DEFAULT_ENDPOINTS[1].shape is ResponseShape.NESTED
    assert all(e.timeout > 0 for e in DEFAULT_ENDPOINTS)
    assert DEFAULT_ENDPOINTS[1].build_url("https://vm.tiktok.com/x") == (
        "https://www.tikwm.com/api/?url=https%3A%2F%2Fvm.tiktok.com%2Fx&hd=1"
    )
