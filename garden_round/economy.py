"""
Wallet for the round.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass


@dataclass
class Economy:
    """
    Money held by the player. Never negative: spending is refused
    outright when the balance is insufficient.
    """
    money: int = 0

    def can_spend(self, amount: int) -> bool:
        return 0 <= amount <= self.money

    def spend(self, amount: int) -> bool:
        """
        Debit `amount`.
        Returns False if the wallet cannot cover it.
        """
        if not self.can_spend(amount):
            return False
        self.money -= amount
        return True

    def credit(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("credit amount must be non-negative")
        self.money += amount
