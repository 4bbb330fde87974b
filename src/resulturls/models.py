"""Shared domain models for resulturls."""

import math
import re
from dataclasses import dataclass
from typing import Any

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def coerce_int(value: Any) -> int:
    """Loose numeric coercion used for run and step numbers.

    Strings contribute their leading digit run (``"3abc"`` is 3), anything
    without one is 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="ignore")
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0
    return 0


def coerce_bool(value: Any) -> bool:
    # "0" counts as false, like an unchecked form field
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


@dataclass(frozen=True)
class RunContext:
    """Identifies one run (or one step of a run) of a test."""

    base_url: str
    test_id: str
    run: int
    cached: bool
    step: int = 1

    @classmethod
    def build(cls, base_url: Any, test_id: Any, run: Any, cached: Any, step: Any = 1) -> "RunContext":
        base = "" if base_url is None else str(base_url)
        return cls(
            base_url=base.rstrip("/"),
            test_id="" if test_id is None else str(test_id),
            run=max(coerce_int(run), 0),
            cached=coerce_bool(cached),
            step=max(coerce_int(step), 1),
        )

    @property
    def is_multistep(self) -> bool:
        return self.step > 1

    @property
    def cached_flag(self) -> int:
        return 1 if self.cached else 0

    def url_params(self) -> str:
        params = f"test={self.test_id}&run={self.run}"
        if self.cached:
            params += "&cached=1"
        if self.is_multistep:
            params += f"&step={self.step}"
        return params

    def underscore_prefix(self) -> str:
        """Filename prefix that namespaces artifacts per run, cache state and step."""
        prefix = f"{self.run}_"
        if self.cached:
            prefix += "Cached_"
        if self.is_multistep:
            prefix += f"{self.step}_"
        return prefix
