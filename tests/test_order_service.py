from __future__ import annotations

from decimal import Decimal

import pytest

from investwallet.trading.errors import WalletError
from investwallet.trading.orders import OrderRejectionReason, OrderService, OrderStatus
from investwallet.trading.wallet import InvestmentWallet, IWallet


@pytest.fixture
def order_service(wallet) -> OrderService:
    return OrderService(wallet)


def test_buy_rejections_carry_reason(order_service, wallet, btc, gold):
    cases = [
        (order_service.submit_buy(btc, 0, Decimal("10")), OrderRejectionReason.INVALID_ARGUMENT),
        (order_service.submit_buy(gold, 1, Decimal("10")), OrderRejectionReason.UNKNOWN_ASSET),
        (order_service.submit_buy(btc, 1, Decimal("9")), OrderRejectionReason.OFFER_PRICE_REJECTED),
        (order_service.submit_buy(btc, 101, Decimal("10")), OrderRejectionReason.INSUFFICIENT_FUNDS),
    ]
    for result, reason in cases:
        assert result.status is OrderStatus.REJECTED
        assert result.rejection_reason is reason
        assert result.message
        assert not result.executed
    assert wallet.get_balance() == Decimal("1000")
    assert wallet.get_all_acquisitions() == ()


def test_sell_rejections_carry_reason(order_service, btc, quotes):
    assert order_service.submit_sell(btc, 1, Decimal("1")).rejection_reason \
        is OrderRejectionReason.INSUFFICIENT_FUNDS

    order_service.submit_buy(btc, 2, Decimal("10"))
    assert order_service.submit_sell(btc, 1, Decimal("9.50")).rejection_reason \
        is OrderRejectionReason.OFFER_PRICE_REJECTED

    quotes.remove_quote(btc)
    assert order_service.submit_sell(btc, 1, Decimal("1")).rejection_reason \
        is OrderRejectionReason.UNKNOWN_ASSET


def test_executed_orders_report_balance(order_service, btc):
    bought = order_service.submit_buy(btc, 5, Decimal("10"))
    assert bought.status is OrderStatus.EXECUTED
    assert bought.balance is None
    assert bought.acquisition.total_cost == Decimal("50")
    assert "BTCUSDT" in bought.message

    sold = order_service.submit_sell(btc, 3, Decimal("9"))
    assert sold.status is OrderStatus.EXECUTED
    assert sold.acquisition is None
    assert sold.balance == Decimal("977")


def test_unmapped_wallet_errors_propagate(btc):
    class BrokenWallet:
        def buy(self, asset, quantity, max_price):
            raise WalletError("boom")

    with pytest.raises(WalletError):
        OrderService(BrokenWallet()).submit_buy(btc, 1, Decimal("1"))


class DelegatingWallet(IWallet):
    """Wallet that forwards every operation to another wallet."""

    def __init__(self, inner: IWallet) -> None:
        self._inner = inner

    def get_balance(self):
        return self._inner.get_balance()

    def get_holdings(self):
        return self._inner.get_holdings()

    def get_quantity(self, asset):
        return self._inner.get_quantity(asset)

    def deposit(self, cash):
        return self._inner.deposit(cash)

    def withdraw(self, cash):
        return self._inner.withdraw(cash)

    def buy(self, asset, quantity, max_price):
        return self._inner.buy(asset, quantity, max_price)

    def sell(self, asset, quantity, min_price):
        return self._inner.sell(asset, quantity, min_price)

    def get_valuation(self):
        return self._inner.get_valuation()

    def get_asset_valuation(self, asset):
        return self._inner.get_asset_valuation(asset)

    def get_most_valuable_asset(self):
        return self._inner.get_most_valuable_asset()

    def get_all_acquisitions(self):
        return self._inner.get_all_acquisitions()

    def get_last_n_acquisitions(self, n):
        return self._inner.get_last_n_acquisitions(n)


def test_wallet_interface_declares_accessors():
    assert {"get_balance", "get_holdings", "get_quantity"} <= IWallet.__abstractmethods__


def test_orders_execute_against_any_wallet_implementation(quotes, btc):
    inner = InvestmentWallet(quotes, Decimal("100"))
    order_service = OrderService(DelegatingWallet(inner))

    bought = order_service.submit_buy(btc, 1, Decimal("10"))
    assert bought.status is OrderStatus.EXECUTED
    assert bought.acquisition.price == Decimal("10")
    assert inner.get_balance() == Decimal("90")
    assert dict(inner.get_holdings()) == {btc: 1}

    sold = order_service.submit_sell(btc, 1, Decimal("9"))
    assert sold.status is OrderStatus.EXECUTED
    assert sold.balance == Decimal("99")
