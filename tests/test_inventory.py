"""
Tests for inventory and wallet.
"""
import pytest
from garden_round.inventory import Inventory
from garden_round.economy import Economy


class TestInventory:
    """Tests for Inventory class."""

    def test_starts_at_stock_level(self):
        inventory = Inventory(["carrot", "corn"], 15)
        assert inventory.counts() == {"carrot": 15, "corn": 15}

    def test_consume(self):
        inventory = Inventory(["carrot"], 2)
        assert inventory.consume("carrot")
        assert inventory.get_count("carrot") == 1

    def test_consume_never_goes_negative(self):
        inventory = Inventory(["carrot"], 1)
        assert inventory.consume("carrot")
        assert not inventory.can_afford("carrot")
        assert not inventory.consume("carrot")
        assert inventory.get_count("carrot") == 0

    def test_unknown_kind(self):
        inventory = Inventory(["carrot"], 5)
        assert not inventory.can_afford("turnip")
        assert not inventory.consume("turnip")

    def test_refill_resets_not_adds(self):
        """Refill sets every kind to the stock level regardless of prior value."""
        inventory = Inventory(["carrot", "corn"], 15)
        for _ in range(10):
            inventory.consume("carrot")

        inventory.refill(now_ms=30_000)
        assert inventory.counts() == {"carrot": 15, "corn": 15}
        assert inventory.last_refill_ms == 30_000

    def test_counts_is_a_copy(self):
        inventory = Inventory(["carrot"], 5)
        counts = inventory.counts()
        counts["carrot"] = 0
        assert inventory.get_count("carrot") == 5


class TestEconomy:
    """Tests for the wallet."""

    def test_spend(self):
        economy = Economy(money=50)
        assert economy.spend(25)
        assert economy.money == 25

    def test_spend_refused_when_insufficient(self):
        economy = Economy(money=20)
        assert not economy.spend(25)
        assert economy.money == 20

    def test_spend_exact_balance(self):
        economy = Economy(money=25)
        assert economy.spend(25)
        assert economy.money == 0

    def test_credit(self):
        economy = Economy(money=0)
        economy.credit(42)
        assert economy.money == 42

    def test_negative_credit_rejected(self):
        with pytest.raises(ValueError):
            Economy(money=10).credit(-1)
