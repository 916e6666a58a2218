from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    error: str | None = None

    @staticmethod
    def proceed() -> "ValidationResult":
        return ValidationResult(ok=True)

    @staticmethod
    def fail(error: str) -> "ValidationResult":
        return ValidationResult(ok=False, error=error)
