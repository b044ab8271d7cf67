"""Account entity as seen by the scheduling engine."""

from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4


class Account:
    """
    A money account that transactions move funds in and out of.

    Accounts are owned elsewhere; the engine only needs their identity, the
    opening balance and the cached current balance it keeps up to date.
    """

    def __init__(
        self,
        name: str,
        initial_balance: Decimal = Decimal(0),
        currency: str = "EUR",
        id: Optional[UUID] = None,
        current_balance: Optional[Decimal] = None,
    ):
        """
        Initialize an account.

        Parameters
        ----------
        name
            Human-readable account name
        initial_balance
            Opening balance the balance fold starts from
        currency
            ISO currency code of the account
        id
            Account ID (generated if not provided, used for reconstitution)
        current_balance
            Cached balance (defaults to the initial balance)
        """
        self._id = id if id is not None else uuid4()
        self._name = name
        self._initial_balance = Decimal(initial_balance)
        self._currency = currency.upper()
        self._current_balance = (
            Decimal(current_balance)
            if current_balance is not None
            else self._initial_balance
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def initial_balance(self) -> Decimal:
        return self._initial_balance

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def current_balance(self) -> Decimal:
        return self._current_balance

    def set_current_balance(self, balance: Decimal) -> None:
        self._current_balance = balance

    def __eq__(self, other) -> bool:
        if not isinstance(other, Account):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return f"Account[{self._name}] {self._current_balance} {self._currency}"
