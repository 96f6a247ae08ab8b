"""CLI tests for `pmt portfolio ...`."""

from __future__ import annotations

import json
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from polymarket_toolkit.api.models.portfolio import BalanceAllowance
from polymarket_toolkit.cli import app

runner = CliRunner()


@pytest.fixture
def trading_client(wallet_env) -> AsyncMock:
    client = AsyncMock()
    with patch(
        "polymarket_toolkit.cli.client_factory.connect_trading_client",
        AsyncMock(return_value=client),
    ):
        yield client


def test_balance(trading_client: AsyncMock) -> None:
    trading_client.get_collateral_balance.return_value = BalanceAllowance(
        balance=Decimal("1234560000"), allowances={"0xExchange": "115792"}
    )

    result = runner.invoke(app, ["portfolio", "balance"])

    assert result.exit_code == 0
    assert "$1,234.56" in result.stdout


def test_balance_json(trading_client: AsyncMock) -> None:
    trading_client.get_collateral_balance.return_value = BalanceAllowance(
        balance=Decimal("5000000")
    )

    result = runner.invoke(app, ["portfolio", "balance", "--json"])

    assert result.exit_code == 0
    assert Decimal(json.loads(result.stdout)["balance"]) == Decimal("5")


def test_balance_without_credentials() -> None:
    result = runner.invoke(app, ["portfolio", "balance"])

    assert result.exit_code == 1
    assert "FUNDER_ADDRESS" in result.stdout


def test_position(trading_client: AsyncMock) -> None:
    trading_client.get_token_balance.return_value = BalanceAllowance(balance=Decimal("2500000"))

    result = runner.invoke(app, ["portfolio", "position", "111"])

    assert result.exit_code == 0
    assert "Shares: 2.5" in result.stdout
    trading_client.get_token_balance.assert_awaited_once_with("111")


def test_no_position_is_not_an_error(trading_client: AsyncMock) -> None:
    trading_client.get_token_balance.return_value = BalanceAllowance(balance=Decimal("0"))

    result = runner.invoke(app, ["portfolio", "position", "111"])

    assert result.exit_code == 0
    assert "No shares held" in result.stdout
