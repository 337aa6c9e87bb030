"""Structure contract tests for the documentlifecycle feature."""
from __future__ import annotations

from pathlib import Path

from documentlifecycle.logic.states.base_state import DocumentState
from documentlifecycle.logic.states.registry import STATE_TYPES
from documentlifecycle.models.document_action import DocumentAction


def test_structure_contract() -> None:
    """Fail if required scaffold files are missing."""
    root = Path(__file__).resolve().parents[1]
    required = [
        root / "models" / "document.py",
        root / "models" / "actor.py",
        root / "models" / "action_result.py",
        root / "models" / "dto" / "document_status_dto.py",
        root / "logic" / "states" / "base_state.py",
        root / "logic" / "states" / "registry.py",
        root / "logic" / "policy" / "permission_policy.py",
        root / "logic" / "policy" / "workflow_policy.py",
        root / "logic" / "adapters" / "report_sinks.py",
        root / "exceptions" / "errors.py",
    ]
    missing = [path for path in required if not path.exists()]
    assert not missing, f"Missing required files: {missing}"


def test_every_state_implements_every_action() -> None:
    """Delegation from the document must be total over the action set."""
    for state_cls in STATE_TYPES.values():
        assert not getattr(state_cls, "__abstractmethods__", None), state_cls
        for action in DocumentAction:
            impl = getattr(state_cls, action.value)
            assert impl is not getattr(DocumentState, action.value), (state_cls, action)
