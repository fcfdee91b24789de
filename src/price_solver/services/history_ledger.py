"""History ledger: a capacity-bounded, append-only log of saved conversions.

The ledger is an immutable value. ``append`` and ``clear`` return a new
ledger; persisting it is left to the caller.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError

from price_solver.core.exceptions import SnapshotFormatError
from price_solver.domain.models import Asset, HistoryRecord

HISTORY_CAPACITY = 100


@dataclass(frozen=True)
class HistoryLedger:
    """Ordered records, oldest first, never longer than ``capacity``."""

    records: tuple[HistoryRecord, ...] = field(default_factory=tuple)
    capacity: int = HISTORY_CAPACITY

    def __post_init__(self) -> None:
        records = tuple(self.records)
        if len(records) > self.capacity:
            records = records[len(records) - self.capacity:]
        object.__setattr__(self, "records", records)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[HistoryRecord]:
        return iter(self.records)

    def append(self, record: HistoryRecord) -> "HistoryLedger":
        """Return a ledger with ``record`` added last, evicting the oldest over capacity."""
        return HistoryLedger(records=self.records + (record,), capacity=self.capacity)

    def clear(self) -> "HistoryLedger":
        """Return an empty ledger with the same capacity."""
        return HistoryLedger(records=(), capacity=self.capacity)

    def newest_first(self) -> list[HistoryRecord]:
        """Records in display order."""
        return list(reversed(self.records))


class SnapshotEntry(BaseModel):
    """
    Wire form of one history record.

    Field names are written in camelCase. The short names used by the first
    browser client (``ts``, ``given``, ``target``, ``input``, ``result``,
    ``fx``) are still accepted when reading.
    """

    model_config = ConfigDict(populate_by_name=True)

    timestamp: int = Field(
        validation_alias=AliasChoices("timestamp", "ts"),
        serialization_alias="timestamp",
    )
    source_asset: Asset = Field(
        validation_alias=AliasChoices("sourceAsset", "given"),
        serialization_alias="sourceAsset",
    )
    target_asset: Asset = Field(
        validation_alias=AliasChoices("targetAsset", "target"),
        serialization_alias="targetAsset",
    )
    source_value: float = Field(
        allow_inf_nan=False,
        validation_alias=AliasChoices("sourceValue", "input"),
        serialization_alias="sourceValue",
    )
    result_value: float = Field(
        allow_inf_nan=False,
        validation_alias=AliasChoices("resultValue", "result"),
        serialization_alias="resultValue",
    )
    precision: int = Field(ge=0, le=8)
    exchange_rate: float = Field(
        ge=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("exchangeRate", "fx"),
        serialization_alias="exchangeRate",
    )

    @model_validator(mode="after")
    def check_distinct_assets(self) -> "SnapshotEntry":
        if self.source_asset == self.target_asset:
            raise ValueError("source and target assets must differ")
        return self

    @classmethod
    def from_record(cls, record: HistoryRecord) -> "SnapshotEntry":
        return cls(
            timestamp=record.timestamp,
            source_asset=record.source_asset,
            target_asset=record.target_asset,
            source_value=record.source_value,
            result_value=record.result_value,
            precision=record.precision,
            exchange_rate=record.exchange_rate,
        )

    def to_record(self) -> HistoryRecord:
        return HistoryRecord(
            timestamp=self.timestamp,
            source_asset=self.source_asset,
            target_asset=self.target_asset,
            source_value=self.source_value,
            result_value=self.result_value,
            precision=self.precision,
            exchange_rate=self.exchange_rate,
        )


_SNAPSHOT_ADAPTER = TypeAdapter(list[SnapshotEntry])


def encode_snapshot(
    records: Iterable[HistoryRecord],
    capacity: int = HISTORY_CAPACITY,
) -> str:
    """Serialize the last ``capacity`` records to JSON text, oldest first."""
    entries = [SnapshotEntry.from_record(r) for r in records]
    entries = entries[-capacity:] if capacity > 0 else []
    return _SNAPSHOT_ADAPTER.dump_json(entries, by_alias=True).decode("utf-8")


def decode_snapshot(
    text: str,
    capacity: int = HISTORY_CAPACITY,
) -> tuple[HistoryRecord, ...]:
    """
    Parse snapshot text back into records.

    Raises:
        SnapshotFormatError: If the text is not a JSON array of valid records.
    """
    try:
        entries = _SNAPSHOT_ADAPTER.validate_json(text)
    except PydanticValidationError as e:
        raise SnapshotFormatError(
            f"Malformed history snapshot ({e.error_count()} error(s))"
        ) from e

    records = tuple(entry.to_record() for entry in entries)
    return records[-capacity:] if capacity > 0 else ()
