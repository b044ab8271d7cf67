"""Transaction aggregate root for the scheduling domain."""

from __future__ import annotations

from datetime import date as date_type
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, FrozenSet, Iterable, Optional, Tuple
from uuid import UUID, uuid4

from cadence.domain.scheduling.exceptions import (
    InvalidTransactionStateError,
    InvalidTransferError,
    NegativeAmountError,
    TransactionAlreadyExecutedError,
)
from cadence.domain.scheduling.value_objects import (
    RecurrenceRule,
    TransactionKind,
    TransactionStatus,
    TransactionType,
)
from cadence.domain.shared.exceptions import ValidationError
from cadence.domain.shared.time import today_utc, utc_now


def _coerce_amount(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            msg = f"Invalid amount '{value}'"
            raise ValidationError(msg) from e
    if amount < 0:
        raise NegativeAmountError(amount)
    return amount


class Transaction:
    """
    A money movement, or the rule that keeps producing them.

    Every row is exactly one of three kinds:

    - template: carries a recurrence rule and no parent. Never "happens"
      itself and never affects balances.
    - instance: carries the id of the template it was generated from.
    - standalone: neither. Created directly by the user and never generates
      anything.

    ``is_scheduled`` and ``is_recurring`` are derived from the stored fields,
    so they can never disagree with them.
    """

    def __init__(  # NOQA: PLR0913
        self,
        transaction_type: TransactionType,
        amount: Decimal | int | str,
        account_id: Optional[UUID],
        date: Optional[date_type] = None,
        category_id: Optional[UUID] = None,
        destination_account_id: Optional[UUID] = None,
        currency: str = "EUR",
        notes: str = "",
        status: TransactionStatus = TransactionStatus.EXECUTED,
        scheduled_date: Optional[date_type] = None,
        is_automatic: bool = False,
        recurrence_rule: Optional[RecurrenceRule] = None,
        recurrence_end_date: Optional[date_type] = None,
        parent_recurring_transaction_id: Optional[UUID] = None,
        include_start_day_in_count: bool = False,
        is_negative_adjustment: bool = False,
        skipped_dates: Optional[Iterable[date_type]] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
    ):
        """
        Initialize a transaction row.

        Prefer the ``standalone``, ``scheduled`` and ``template`` factories
        and ``Transaction.spawn_instance``; the constructor is also used to
        reconstitute rows read back from a store.

        Parameters
        ----------
        transaction_type
            Expense, income, transfer or adjustment
        amount
            Non-negative amount; the sign comes from the type
        account_id
            Owning account
        date
            Effective date (defaults to today, or to ``scheduled_date``)
        category_id
            Category the row is filed under
        destination_account_id
            Receiving account, transfers only
        status
            Pending rows wait for their scheduled date or a confirmation
        scheduled_date
            Due date of a row that has not happened yet
        is_automatic
            Execute without user confirmation once due
        recurrence_rule
            Present only on templates
        recurrence_end_date
            Last day a template may produce occurrences on
        parent_recurring_transaction_id
            Template id, present only on instances
        include_start_day_in_count
            Whether the template's own date already counts as an occurrence
        is_negative_adjustment
            Direction of a balance adjustment
        skipped_dates
            Occurrences of a template that were deleted and must not come back
        """
        self._id = id if id is not None else uuid4()
        self._transaction_type = TransactionType(transaction_type)
        self._amount = _coerce_amount(amount)
        self._account_id = account_id
        self._category_id = category_id
        self._destination_account_id = destination_account_id
        self._currency = currency.upper()
        self._notes = notes
        self._status = TransactionStatus(status)
        self._scheduled_date = scheduled_date
        self._date = date or scheduled_date or today_utc()
        self._is_automatic = is_automatic
        self._recurrence_rule = recurrence_rule
        self._recurrence_end_date = recurrence_end_date
        self._parent_id = parent_recurring_transaction_id
        self._include_start_day_in_count = include_start_day_in_count
        self._is_negative_adjustment = is_negative_adjustment
        self._skipped_dates: FrozenSet[date_type] = frozenset(skipped_dates or ())
        self._created_at = created_at or utc_now()

        self._validate()

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def standalone(  # NOQA: PLR0913
        cls,
        transaction_type: TransactionType,
        amount: Decimal | int | str,
        account_id: UUID,
        date: Optional[date_type] = None,
        category_id: Optional[UUID] = None,
        destination_account_id: Optional[UUID] = None,
        currency: str = "EUR",
        notes: str = "",
        is_negative_adjustment: bool = False,
    ) -> Transaction:
        """Create a one-off row that has already happened."""
        return cls(
            transaction_type=transaction_type,
            amount=amount,
            account_id=account_id,
            date=date,
            category_id=category_id,
            destination_account_id=destination_account_id,
            currency=currency,
            notes=notes,
            status=TransactionStatus.EXECUTED,
            is_negative_adjustment=is_negative_adjustment,
        )

    @classmethod
    def scheduled(  # NOQA: PLR0913
        cls,
        transaction_type: TransactionType,
        amount: Decimal | int | str,
        account_id: UUID,
        scheduled_date: date_type,
        is_automatic: bool = False,
        category_id: Optional[UUID] = None,
        destination_account_id: Optional[UUID] = None,
        currency: str = "EUR",
        notes: str = "",
        is_negative_adjustment: bool = False,
    ) -> Transaction:
        """Create a one-off row that waits for its due date."""
        return cls(
            transaction_type=transaction_type,
            amount=amount,
            account_id=account_id,
            category_id=category_id,
            destination_account_id=destination_account_id,
            currency=currency,
            notes=notes,
            status=TransactionStatus.PENDING,
            scheduled_date=scheduled_date,
            is_automatic=is_automatic,
            is_negative_adjustment=is_negative_adjustment,
        )

    @classmethod
    def template(  # NOQA: PLR0913
        cls,
        transaction_type: TransactionType,
        amount: Decimal | int | str,
        account_id: UUID,
        recurrence_rule: RecurrenceRule,
        start_date: date_type,
        is_automatic: bool = False,
        category_id: Optional[UUID] = None,
        destination_account_id: Optional[UUID] = None,
        recurrence_end_date: Optional[date_type] = None,
        include_start_day_in_count: bool = False,
        currency: str = "EUR",
        notes: str = "",
        is_negative_adjustment: bool = False,
    ) -> Transaction:
        """Create a recurring template anchored on ``start_date``."""
        return cls(
            transaction_type=transaction_type,
            amount=amount,
            account_id=account_id,
            date=start_date,
            category_id=category_id,
            destination_account_id=destination_account_id,
            currency=currency,
            notes=notes,
            status=TransactionStatus.PENDING,
            is_automatic=is_automatic,
            recurrence_rule=recurrence_rule,
            recurrence_end_date=recurrence_end_date,
            include_start_day_in_count=include_start_day_in_count,
            is_negative_adjustment=is_negative_adjustment,
        )

    def spawn_instance(self, scheduled_date: date_type) -> Transaction:
        """Create the pending occurrence of this template due on ``scheduled_date``."""
        if not self.is_template:
            raise InvalidTransactionStateError(
                self._id,
                "only templates can produce instances",
            )
        if self.is_past_end(scheduled_date):
            raise InvalidTransactionStateError(
                self._id,
                f"{scheduled_date} is after the series end {self._recurrence_end_date}",
            )

        return Transaction(
            transaction_type=self._transaction_type,
            amount=self._amount,
            account_id=self._account_id,
            category_id=self._category_id,
            destination_account_id=self._destination_account_id,
            currency=self._currency,
            notes=self._notes,
            status=TransactionStatus.PENDING,
            scheduled_date=scheduled_date,
            is_automatic=self._is_automatic,
            parent_recurring_transaction_id=self._id,
            is_negative_adjustment=self._is_negative_adjustment,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def transaction_type(self) -> TransactionType:
        return self._transaction_type

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def account_id(self) -> Optional[UUID]:
        return self._account_id

    @property
    def category_id(self) -> Optional[UUID]:
        return self._category_id

    @property
    def destination_account_id(self) -> Optional[UUID]:
        return self._destination_account_id

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def notes(self) -> str:
        return self._notes

    @property
    def date(self) -> date_type:
        return self._date

    @property
    def scheduled_date(self) -> Optional[date_type]:
        return self._scheduled_date

    @property
    def status(self) -> TransactionStatus:
        return self._status

    @property
    def is_automatic(self) -> bool:
        return self._is_automatic

    @property
    def recurrence_rule(self) -> Optional[RecurrenceRule]:
        return self._recurrence_rule

    @property
    def recurrence_end_date(self) -> Optional[date_type]:
        return self._recurrence_end_date

    @property
    def parent_recurring_transaction_id(self) -> Optional[UUID]:
        return self._parent_id

    @property
    def include_start_day_in_count(self) -> bool:
        return self._include_start_day_in_count

    @property
    def is_negative_adjustment(self) -> bool:
        return self._is_negative_adjustment

    @property
    def skipped_dates(self) -> FrozenSet[date_type]:
        return self._skipped_dates

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_recurring(self) -> bool:
        return self._recurrence_rule is not None

    @property
    def is_scheduled(self) -> bool:
        return (
            self._scheduled_date is not None
            and self._status == TransactionStatus.PENDING
        )

    @property
    def is_executed(self) -> bool:
        return self._status == TransactionStatus.EXECUTED

    @property
    def kind(self) -> TransactionKind:
        if self._parent_id is not None:
            return TransactionKind.INSTANCE
        if self._recurrence_rule is not None:
            return TransactionKind.TEMPLATE
        return TransactionKind.STANDALONE

    @property
    def is_template(self) -> bool:
        return self.kind == TransactionKind.TEMPLATE

    @property
    def is_instance(self) -> bool:
        return self.kind == TransactionKind.INSTANCE

    @property
    def is_standalone(self) -> bool:
        return self.kind == TransactionKind.STANDALONE

    @property
    def series_root_id(self) -> UUID:
        """Id of the template this row belongs to (itself for templates)."""
        return self._parent_id or self._id

    @property
    def affected_account_ids(self) -> Tuple[UUID, ...]:
        ids = []
        if self._account_id is not None:
            ids.append(self._account_id)
        if (
            self._destination_account_id is not None
            and self._destination_account_id not in ids
        ):
            ids.append(self._destination_account_id)
        return tuple(ids)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_due(self, on: date_type) -> bool:
        """Whether a scheduled row has reached its due date."""
        if not self.is_scheduled:
            return False
        return self._scheduled_date <= on  # type: ignore[operator]

    def is_past_end(self, candidate: date_type) -> bool:
        return (
            self._recurrence_end_date is not None
            and candidate > self._recurrence_end_date
        )

    def happened_on(self, day: date_type) -> bool:
        """Whether this row belongs to the "what happened on ``day``" view."""
        return not self.is_template and self._date == day

    def balance_effect_on(self, account_id: UUID) -> Decimal:
        """Signed effect of this row on ``account_id``; zero unless executed."""
        if not self.is_executed or self.is_template:
            return Decimal(0)

        effect = Decimal(0)
        if account_id == self._account_id:
            effect += self._transaction_type.balance_effect(
                self._amount,
                is_negative_adjustment=self._is_negative_adjustment,
            )
        if account_id == self._destination_account_id:
            effect += self._transaction_type.balance_effect(
                self._amount,
                is_destination=True,
            )
        return effect

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def execute(self, on: Optional[date_type] = None) -> None:
        """Move a pending row to executed.

        The booked date becomes the scheduled date, so an overdue row is
        recorded on the day it was due rather than the day it was confirmed.
        """
        if self.is_template:
            raise InvalidTransactionStateError(
                self._id,
                "templates never execute; execute their instances",
            )
        if self.is_executed:
            raise TransactionAlreadyExecutedError(self._id)

        self._status = TransactionStatus.EXECUTED
        self._date = self._scheduled_date or on or today_utc()

    def end_recurrence(self, last_day: date_type) -> None:
        """Stop a template from producing occurrences after ``last_day``."""
        if not self.is_template:
            raise InvalidTransactionStateError(
                self._id,
                "only templates have a recurrence end date",
            )
        if last_day < self._date:
            last_day = self._date
        if self._recurrence_end_date is None or last_day < self._recurrence_end_date:
            self._recurrence_end_date = last_day

    def skip_occurrence(self, on: date_type) -> None:
        """Remember that the occurrence on ``on`` was deleted on purpose."""
        if not self.is_template:
            raise InvalidTransactionStateError(
                self._id,
                "only templates track skipped occurrences",
            )
        self._skipped_dates = self._skipped_dates | {on}

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------

    def _validate(self) -> None:
        if self._recurrence_rule is not None and self._parent_id is not None:
            raise InvalidTransactionStateError(
                self._id,
                "a row cannot be both a template and an instance",
            )

        if self._recurrence_rule is None:
            if self._recurrence_end_date is not None:
                raise InvalidTransactionStateError(
                    self._id,
                    "only templates carry a recurrence end date",
                )
            if self._include_start_day_in_count:
                raise InvalidTransactionStateError(
                    self._id,
                    "only templates carry include_start_day_in_count",
                )
            if self._skipped_dates:
                raise InvalidTransactionStateError(
                    self._id,
                    "only templates track skipped occurrences",
                )
        else:
            if self._scheduled_date is not None:
                raise InvalidTransactionStateError(
                    self._id,
                    "templates are anchored by their date, not a scheduled date",
                )
            if self._status != TransactionStatus.PENDING:
                raise InvalidTransactionStateError(
                    self._id,
                    "templates never execute",
                )

        if (
            self._status == TransactionStatus.PENDING
            and self._recurrence_rule is None
            and self._scheduled_date is None
        ):
            raise InvalidTransactionStateError(
                self._id,
                "a pending row needs a scheduled date",
            )

        if self._transaction_type == TransactionType.TRANSFER:
            if self._destination_account_id is None:
                msg = "transfers need a destination account"
                raise InvalidTransferError(msg)
            if self._destination_account_id == self._account_id:
                msg = "source and destination account are the same"
                raise InvalidTransferError(msg)
        elif self._destination_account_id is not None:
            msg = "only transfers have a destination account"
            raise InvalidTransferError(msg)

        if (
            self._is_negative_adjustment
            and self._transaction_type != TransactionType.ADJUSTMENT
        ):
            msg = "only adjustments can be negative"
            raise ValidationError(msg)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transaction):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        parts = [
            f"Transaction[{self.kind.value.upper()}/{self._status.value.upper()}]:",
            f"{self._transaction_type.value} {self._amount} {self._currency}",
            f"on {self._date.isoformat()}",
        ]
        if self._scheduled_date is not None:
            parts.append(f"scheduled={self._scheduled_date.isoformat()}")
        if self._recurrence_rule is not None:
            parts.append(f"({self._recurrence_rule})")
        return " ".join(parts)
