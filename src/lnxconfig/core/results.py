from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .model import CheckResult, CheckStatus, Severity


@dataclass(slots=True)
class RunSummary:
    source: Path | None = None
    results: list[CheckResult] = field(default_factory=list)

    def add(self, result: CheckResult) -> None:
        self.results.append(result)

    def extend(self, results: list[CheckResult]) -> None:
        self.results.extend(results)

    def failures(self) -> list[CheckResult]:
        return [r for r in self.results if r.status != CheckStatus.PASS]

    def counts_by_status(self) -> dict[str, int]:
        counts = {status.value: 0 for status in CheckStatus}
        for r in self.results:
            counts[r.status.value] += 1
        return counts

    def failures_by_check(self) -> dict[str, int]:
        out: dict[str, int] = {}
        for r in self.failures():
            out[r.phase] = out.get(r.phase, 0) + 1
        return out

    @property
    def exit_code(self) -> int:
        return 1 if any(r.status == CheckStatus.FAIL and r.severity == Severity.ERROR for r in self.results) else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": {
                "source": str(self.source) if self.source else None,
                "counts_by_status": self.counts_by_status(),
                "failures_by_check": self.failures_by_check(),
                "exit_code": self.exit_code,
            },
            "results": [r.to_dict() for r in self.results],
        }
