"""CLI smoke tests."""

import json

import pytest
from typer.testing import CliRunner

from goatmouth.cli.app import app

runner = CliRunner()


@pytest.fixture
def sources_file(tmp_path):
    data = {
        "bets": [
            {
                "created_at": "2026-03-01T10:00:00Z",
                "amount": 20,
                "outcome": "yes",
                "user": {"username": "alice"},
                "markets": {"title": "Will it rain?"},
            }
        ],
        "comments": [
            {"created_at": "2026-03-01T10:05:00Z", "user": None, "markets": {"title": "Will it rain?"}}
        ],
        "transactions": [{"type": "deposit", "amount": 50, "created_at": "2026-03-01T09:59:00Z"}],
    }
    path = tmp_path / "sources.json"
    path.write_text(json.dumps(data))
    return path


def test_quote_command():
    result = runner.invoke(app, ["odds", "quote", "--probability", "0.25", "--stake", "20"])
    assert result.exit_code == 0, result.output
    assert "Odds: 4.00x" in result.output
    assert "Payout: J$80.00" in result.output
    assert "Profit: J$60.00" in result.output


def test_quote_command_invalid_probability():
    result = runner.invoke(app, ["odds", "quote", "-P", "0", "-s", "20"])
    assert result.exit_code == 1
    assert "Odds: -" in result.output
    assert "invalid_probability" in result.output


def test_slip_command(tmp_path):
    path = tmp_path / "market.json"
    path.write_text(json.dumps({"id": "m1", "title": "Will it rain?", "yes_price": 0.25, "no_price": 0.75}))
    result = runner.invoke(app, ["odds", "slip", str(path), "--outcome", "yes", "--stake", "20"])
    assert result.exit_code == 0, result.output
    assert "[Place Bet: J$20.00]" in result.output
    assert "Profit: +J$60.00" in result.output


def test_slip_command_numeric_market_id(tmp_path):
    path = tmp_path / "market.json"
    path.write_text(json.dumps({"id": 7, "yes_price": 0.5, "no_price": 0.5}))
    result = runner.invoke(app, ["odds", "slip", str(path), "--stake", "10"])
    assert result.exit_code == 0, result.output
    assert "7  YES @ 50¢" in result.output


def test_slip_command_below_minimum(tmp_path):
    path = tmp_path / "market.json"
    path.write_text(json.dumps({"id": "m1", "yes_price": 0.5, "no_price": 0.5}))
    result = runner.invoke(app, ["odds", "slip", str(path), "--stake", "0.5"])
    assert result.exit_code == 1
    assert "invalid_stake" in result.output


def test_feed_command(sources_file):
    result = runner.invoke(app, ["activity", "feed", str(sources_file)])
    assert result.exit_code == 0, result.output
    lines = [line for line in result.output.splitlines() if line.startswith("  [")]
    assert lines[0].startswith("  [Comment Posted] Unknown")
    assert lines[1].startswith('  [Bet Placed] alice: YES on "Will it rain?" - J$20.00')
    assert lines[2].startswith("  [Deposit] Unknown: +J$50.00")
    assert "Total: 3 events" in result.output


def test_feed_command_limit(sources_file):
    result = runner.invoke(app, ["activity", "feed", str(sources_file), "--limit", "1"])
    assert result.exit_code == 0, result.output
    assert "Total: 1 events" in result.output


def test_feed_command_malformed_row(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"kind": "bets", "rows": [{"amount": 1}]}]))
    result = runner.invoke(app, ["activity", "feed", str(path)])
    assert result.exit_code == 1
    assert "Cannot build feed" in result.output


def test_admin_stats_command(tmp_path):
    markets = tmp_path / "markets.json"
    markets.write_text(json.dumps([{"status": "active", "total_volume": 100}, {"status": "resolved", "total_volume": 50}]))
    users = tmp_path / "users.json"
    users.write_text(json.dumps([{"role": "admin", "balance": 10}, {"role": "user", "balance": 5}]))
    result = runner.invoke(app, ["admin", "stats", str(markets), "--users", str(users)])
    assert result.exit_code == 0, result.output
    assert "Markets: 2  Active: 1  Resolved: 1" in result.output
    assert "Total volume: J$150.00" in result.output
    assert "Total balance: J$15.00" in result.output
