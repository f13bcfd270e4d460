"""Admin dashboard counters."""

from goatmouth.admin.stats import market_stats, portfolio_summary, user_stats


def test_market_stats():
    rows = [
        {"status": "active", "total_volume": "120.5"},
        {"status": "active", "total_volume": 30},
        {"status": "resolved", "total_volume": None},
        {"status": "closed"},
    ]
    stats = market_stats(rows)
    assert (stats.total, stats.active, stats.resolved) == (4, 2, 1)
    assert stats.total_volume == 150.5


def test_user_stats():
    rows = [
        {"role": "admin", "balance": 1000},
        {"role": "user", "balance": "250.25"},
        {"role": "user", "balance": "n/a"},
    ]
    stats = user_stats(rows)
    assert (stats.total, stats.admins, stats.users) == (3, 1, 2)
    assert stats.total_balance == 1250.25


def test_portfolio_summary():
    summary = portfolio_summary(
        [
            {"total_invested": 100, "current_value": 130},
            {"total_invested": "50", "current_value": 20},
        ]
    )
    assert summary.total_invested == 150
    assert summary.current_value == 150
    assert summary.profit_loss == 0


def test_empty_inputs():
    assert market_stats(None).total == 0
    assert user_stats([]).total_balance == 0
    assert portfolio_summary(None).profit_loss == 0
