"""Priority-ordered field aliases for inconsistently named vendor records."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Tuple

__all__ = ["FIELD_PATHS", "lookup"]

Path = Tuple[str, ...]

_VITALS: Tuple[Path, ...] = (("vitals",), ("Vitals",), ("clinical", "vitals"))
_BP_OBJECTS: Tuple[Path, ...] = (
    ("blood_pressure",),
    ("bloodPressure",),
    ("bp_reading",),
    ("bpReading",),
    ("vitals", "blood_pressure"),
    ("vitals", "bloodPressure"),
    ("vitals", "bp"),
    ("bp",),
)


def _under(prefixes: Tuple[Path, ...], *names: str) -> Tuple[Path, ...]:
    return tuple(prefix + (name,) for prefix in prefixes for name in names)


FIELD_PATHS: Dict[str, Tuple[Path, ...]] = {
    "id": (("id",), ("patientId",), ("patient_id",), ("_id",)),
    "age": (("age",), ("Age",)) + _under(_VITALS, "age", "Age"),
    "temperature": (
        ("temperatureF",),
        ("temperature_f",),
        ("temp",),
        ("Temp",),
        ("temperature",),
    )
    + _under(_VITALS, "temperatureF", "temp", "temperature"),
    "systolic": (
        ("systolic",),
        ("bpSystolic",),
        ("bp_systolic",),
        ("systolic_bp",),
        ("sbp",),
    )
    + _under(_VITALS, "systolic", "sbp")
    + _under(_BP_OBJECTS, "systolic"),
    "diastolic": (
        ("diastolic",),
        ("bpDiastolic",),
        ("bp_diastolic",),
        ("diastolic_bp",),
        ("dbp",),
    )
    + _under(_VITALS, "diastolic", "dbp")
    + _under(_BP_OBJECTS, "diastolic"),
    "bp": (
        ("bp",),
        ("BP",),
        ("bloodPressure",),
        ("blood_pressure",),
    )
    + _under(_VITALS, "bp", "BP", "bloodPressure", "blood_pressure"),
}


def _resolve(record: Mapping[str, Any], path: Path) -> Any:
    current: Any = record
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def lookup(record: Any, field: str) -> Any:
    """Return the first present, non-null value among the aliases of *field*."""

    if not isinstance(record, Mapping):
        return None
    for path in FIELD_PATHS[field]:
        value = _resolve(record, path)
        if value is not None:
            return value
    return None
