"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from taskdesk.infrastructure.
"""

from taskdesk.application.interfaces.repositories import (
    IApplicationRepository,
    ITaskRepository,
)

__all__ = [
    "IApplicationRepository",
    "ITaskRepository",
]
