"""CLI tests for `pmt search`, `pmt tags` and `pmt event list`."""

from __future__ import annotations

import json

import respx
from httpx import Response
from typer.testing import CliRunner

from polymarket_toolkit.cli import app

GAMMA_URL = "https://gamma-api.polymarket.com"

runner = CliRunner()


class TestSearch:
    def test_malformed_chain_id_exits_1(self, monkeypatch) -> None:
        monkeypatch.setenv("POLYMARKET_CHAIN_ID", "polygon")

        result = runner.invoke(app, ["search", "bitcoin"])

        assert result.exit_code == 1
        assert "POLYMARKET_CHAIN_ID must be an integer" in result.stdout

    @respx.mock
    def test_search_lists_events_and_tags(self, event_payload) -> None:
        route = respx.get(f"{GAMMA_URL}/public-search").mock(
            return_value=Response(
                200,
                json={
                    "events": [event_payload],
                    "tags": [{"id": "21", "label": "Crypto", "slug": "crypto", "event_count": 7}],
                },
            )
        )

        result = runner.invoke(app, ["search", "bitcoin", "--limit", "3"])

        assert result.exit_code == 0
        assert "bitcoin-up-or-down" in result.stdout
        assert "Crypto (7)" in result.stdout
        assert route.calls.last.request.url.params["limit_per_type"] == "3"

    @respx.mock
    def test_no_results_exits_0(self) -> None:
        respx.get(f"{GAMMA_URL}/public-search").mock(
            return_value=Response(200, json={"events": None, "tags": []})
        )

        result = runner.invoke(app, ["search", "zzzz"])

        assert result.exit_code == 0
        assert "No results for 'zzzz'" in result.stdout

    def test_blank_query_exits_1(self) -> None:
        result = runner.invoke(app, ["search", "  "])

        assert result.exit_code == 1


class TestTags:
    @respx.mock
    def test_tags_json(self) -> None:
        respx.get(f"{GAMMA_URL}/tags").mock(
            return_value=Response(200, json=[{"id": 1, "label": "Politics", "slug": "politics"}])
        )

        result = runner.invoke(app, ["tags", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["slug"] == "politics"


class TestEventList:
    @respx.mock
    def test_filters_and_pagination_hint(self, event_payload) -> None:
        route = respx.get(f"{GAMMA_URL}/events").mock(
            return_value=Response(200, json=[event_payload, event_payload])
        )

        result = runner.invoke(
            app,
            [
                "event",
                "list",
                "--limit",
                "2",
                "--offset",
                "4",
                "--sort",
                "volume",
                "--desc",
                "--tag-slug",
                "crypto",
                "--featured",
            ],
        )

        assert result.exit_code == 0
        assert "Showing 2 events from offset 4" in result.stdout
        assert "Next page: --offset 6" in result.stdout
        params = route.calls.last.request.url.params
        assert params["limit"] == "2"
        assert params["offset"] == "4"
        assert params["order"] == "volume"
        assert params["ascending"] == "false"
        assert params["tag_slug"] == "crypto"
        assert params["closed"] == "false"
        assert params["featured"] == "true"

    @respx.mock
    def test_all_drops_closed_filter(self) -> None:
        route = respx.get(f"{GAMMA_URL}/events").mock(return_value=Response(200, json=[]))

        result = runner.invoke(app, ["event", "list", "--all"])

        assert result.exit_code == 0
        assert "No events found" in result.stdout
        assert "closed" not in route.calls.last.request.url.params

    @respx.mock
    def test_closed_events(self) -> None:
        route = respx.get(f"{GAMMA_URL}/events").mock(return_value=Response(200, json=[]))

        runner.invoke(app, ["event", "list", "--closed"])

        assert route.calls.last.request.url.params["closed"] == "true"

    def test_conflicting_status_flags_exit_1(self) -> None:
        result = runner.invoke(app, ["event", "list", "--closed", "--all"])

        assert result.exit_code == 1
        assert "only one of" in result.stdout
