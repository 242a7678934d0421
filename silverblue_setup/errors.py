from __future__ import annotations

from typing import Sequence


class SetupError(RuntimeError):
    """Base class for every fatal setup error."""


class PreflightError(SetupError):
    pass


class SetupCancelled(SetupError):
    def __init__(self, step_id: str | None = None) -> None:
        self.step_id = step_id
        super().__init__("Setup cancelled by user")


class CommandFailed(SetupError):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command failed ({returncode}): {' '.join(self.argv)}"
        if stderr.strip():
            msg += f"\n{stderr.strip()}"
        super().__init__(msg)


class PostconditionFailed(SetupError):
    """The action reported success but the expected outcome is missing."""

    def __init__(self, step_id: str, expectation: str) -> None:
        self.step_id = step_id
        self.expectation = expectation
        super().__init__(f"Step {step_id} ran without error but {expectation}")


class BatchFailure(SetupError):
    def __init__(self, what: str, failed: Sequence[str]) -> None:
        self.failed = list(failed)
        super().__init__(f"Failed to install {what}: {' '.join(self.failed)}")


class ConfigError(SetupError):
    pass


class StateError(SetupError):
    pass
