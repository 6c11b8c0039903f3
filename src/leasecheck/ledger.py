"""
Ownership ledger: party name -> fractional interest for one run.
"""

from fractions import Fraction
from typing import Dict, Iterator, List, Tuple


class OwnershipLedger:
    """
    Mutable ownership state for a single lease check run.

    Party names are kept exactly as given (no case folding). Balances are
    exact Fractions and may go negative while instruments are replayed.
    Iteration follows first-seen order.
    """

    def __init__(self):
        self._balances: Dict[str, Fraction] = {}

    def balance(self, party: str) -> Fraction:
        """Current balance of a party, zero if the party has never appeared"""
        return self._balances.get(party, Fraction(0))

    def credit(self, party: str, amount: Fraction):
        self._balances[party] = self.balance(party) + amount

    def debit(self, party: str, amount: Fraction):
        self._balances[party] = self.balance(party) - amount

    def set_balance(self, party: str, amount: Fraction):
        self._balances[party] = Fraction(amount)

    def prune(self, epsilon: Fraction) -> List[str]:
        """
        Remove every entry whose absolute balance is below epsilon.

        Returns:
            Names of the removed parties
        """
        removed = [party for party, value in self._balances.items() if abs(value) < epsilon]
        for party in removed:
            del self._balances[party]
        return removed

    def total(self) -> Fraction:
        return sum(self._balances.values(), Fraction(0))

    def items(self) -> Iterator[Tuple[str, Fraction]]:
        return iter(list(self._balances.items()))

    def as_dict(self) -> Dict[str, Fraction]:
        return dict(self._balances)

    def __contains__(self, party: str) -> bool:
        return party in self._balances

    def __len__(self) -> int:
        return len(self._balances)
