"""
Human-in-the-loop resolution of abilities that could not be bound automatically.
"""
from .session_state import (
    Abort,
    Assign,
    Decision,
    ItemOutcome,
    ItemRecord,
    ResolutionSession,
    Skip,
    WorkflowReport,
    WorkflowState,
)
from .resolution_workflow import Presentation, SequentialResolutionWorkflow, SkillOption

__all__ = [
    "Abort",
    "Assign",
    "Decision",
    "ItemOutcome",
    "ItemRecord",
    "ResolutionSession",
    "Skip",
    "WorkflowReport",
    "WorkflowState",
    "Presentation",
    "SequentialResolutionWorkflow",
    "SkillOption",
]
