#!filepath: nglog/export.py
from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from nglog.errors import MalformedInput
from nglog.model import NgEvent, NgLog
from nglog.utils.logger import logs

EVENT_SCHEMA = pa.schema(
    [
        ("line_no", pa.int64()),
        ("timestamp", pa.string()),
        ("event_class", pa.string()),
        ("event_id", pa.string()),
        ("event_params", pa.list_(pa.string())),
    ]
)


def to_arrow(log: NgLog) -> pa.Table:
    """
    NgLog → Arrow Table（一行一个事件，行序 = 事件顺序）

    event_class 缺失 → null
    """
    n = len(log)
    table = pa.table(
        {
            "line_no": list(range(1, n + 1)),
            "timestamp": [ev.timestamp for ev in log],
            "event_class": [ev.event_class for ev in log],
            "event_id": [ev.event_id for ev in log],
            "event_params": [list(ev.event_params) for ev in log],
        },
        schema=EVENT_SCHEMA,
    )
    logs.debug(f"[to_arrow] rows={table.num_rows}")
    return table


def from_arrow(table: pa.Table) -> NgLog:
    missing = set(EVENT_SCHEMA.names) - set(table.column_names) - {"line_no"}
    if missing:
        raise MalformedInput(f"missing columns: {sorted(missing)}")

    if "line_no" in table.column_names:
        table = table.sort_by("line_no")

    events = [
        NgEvent(
            timestamp=row["timestamp"],
            event_class=row["event_class"],
            event_id=row["event_id"],
            event_params=row["event_params"] or (),
        )
        for row in table.to_pylist()
    ]
    return NgLog(tuple(events))


def write_parquet(log: NgLog, path: str | Path, compression: str = "zstd") -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    table = to_arrow(log)
    pq.write_table(table, path, compression=None if compression == "none" else compression)

    logs.debug(f"[write_parquet] {path} rows={table.num_rows} compression={compression}")
    return path


def read_parquet(path: str | Path) -> NgLog:
    return from_arrow(pq.read_table(path))
