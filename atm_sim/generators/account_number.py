"""Account number generator."""

from collections.abc import Collection

from atm_sim.exceptions import NamespaceExhaustedError
from atm_sim.generators.base import BaseGenerator


class AccountNumberGenerator(BaseGenerator):
    """Draw unique 6-digit account numbers by rejection sampling."""

    MIN_NUMBER = 100_000
    MAX_NUMBER = 999_999
    CAPACITY = MAX_NUMBER - MIN_NUMBER + 1

    @classmethod
    def in_range(cls, number: int) -> bool:
        return cls.MIN_NUMBER <= number <= cls.MAX_NUMBER

    def generate(self, in_use: Collection[int]) -> int:
        """Return a number in [100000, 999999] not present in ``in_use``.

        Parameters
        ----------
        in_use : Collection[int]
            Numbers currently registered. Only in-range numbers are expected.

        Raises
        ------
        NamespaceExhaustedError
            If every number in the range is taken.
        """
        if len(in_use) >= self.CAPACITY:
            raise NamespaceExhaustedError(
                f"All {self.CAPACITY} account numbers are in use"
            )
        while True:
            number = self.random.randint(self.MIN_NUMBER, self.MAX_NUMBER)
            if number not in in_use:
                return number
