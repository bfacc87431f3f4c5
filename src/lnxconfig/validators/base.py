from typing import Any

from lnxconfig.core.model import CheckResult, CheckStatus, Severity


def make_result(check: str, name: str, ok: bool, message: str, severity: Severity = Severity.ERROR, evidence: dict[str, Any] | None = None) -> CheckResult:
    failed = CheckStatus.FAIL if severity == Severity.ERROR else CheckStatus.WARN
    return CheckResult(
        phase=check,
        name=name,
        status=CheckStatus.PASS if ok else failed,
        severity=Severity.INFO if ok else severity,
        message=message,
        evidence=evidence or {},
    )
