"""Unit tests for default agent URL parsing and registration."""

import asyncio

import pytest

from agent_directory.agents import AgentCard
from agent_directory.directory import AgentDirectory, load_defaults, parse_agent_urls


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, []),
        ("", []),
        ("   ", []),
        ("https://a.example", ["https://a.example"]),
        (
            " https://a.example , ,https://b.example,",
            ["https://a.example", "https://b.example"],
        ),
    ],
)
def test_parse_agent_urls(value, expected):
    """Test splitting, trimming and filtering of the URL list."""
    assert parse_agent_urls(value) == expected


def test_parse_agent_urls_custom_delimiter():
    """Test a non-default delimiter."""
    assert parse_agent_urls("a.example; b.example", delimiter=";") == [
        "a.example",
        "b.example",
    ]


@pytest.mark.asyncio
async def test_load_defaults_empty():
    """Test that no URLs means no attempts."""

    async def register(url):
        raise AssertionError("should not be called")

    assert await load_defaults([], register) == []


@pytest.mark.asyncio
async def test_load_defaults_isolates_failures():
    """Test that one failing URL does not stop the others."""
    directory = AgentDirectory()
    delays = {"https://valid1.example": 0.03, "https://valid2.example": 0.0}

    async def register(url):
        if url == "https://invalid.example":
            raise RuntimeError("unreachable")
        await asyncio.sleep(delays[url])
        card = AgentCard(url=url, name=url)
        directory.register(card)
        return card

    outcomes = await load_defaults(
        ["https://valid1.example", "https://invalid.example", "https://valid2.example"],
        register,
    )

    assert [o.url for o in outcomes] == [
        "https://valid1.example",
        "https://invalid.example",
        "https://valid2.example",
    ]
    assert [o.ok for o in outcomes] == [True, False, True]
    assert str(outcomes[1].error) == "unreachable"
    assert outcomes[1].card is None
    assert outcomes[0].card.url == "https://valid1.example"

    urls = {card.url for card in directory.list_all()}
    assert urls == {"https://valid1.example", "https://valid2.example"}


@pytest.mark.asyncio
async def test_load_defaults_runs_attempts_concurrently():
    """Test that attempts are in flight at the same time."""
    in_flight = 0
    peak = 0

    async def register(url):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return None

    await load_defaults(["a", "b", "c"], register)

    assert peak == 3
