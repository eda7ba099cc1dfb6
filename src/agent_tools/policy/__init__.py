"""
Policy Engine for Agent Tool Filtering.

Provides a 3-stage cascading policy pipeline that controls which tools are
exposed for one request:

Stages:
    1. Surface (tool surface scopes)
    2. Sandbox (sandbox allow/deny, when enabled)
    3. Agent (agent tool config allow/deny)
"""

from .engine import (
    POLICY_STAGES,
    agent_stage,
    apply_allow_deny,
    filter_tools,
    sandbox_stage,
    surface_stage,
)

__all__ = [
    "POLICY_STAGES",
    "agent_stage",
    "apply_allow_deny",
    "filter_tools",
    "sandbox_stage",
    "surface_stage",
]
