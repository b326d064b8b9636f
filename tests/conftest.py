from typing import Any, Dict, List, Mapping, Optional, Tuple

import pytest


class RecordingLogger:
    """In-memory stand-in for the injected notice logger."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def log(self, severity: str, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.records.append((severity, message, dict(context or {})))

    def at(self, severity: str) -> List[Tuple[str, str, Dict[str, Any]]]:
        return [record for record in self.records if record[0] == severity]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
