"""Responders that answer questions about the uploaded resume.

Responsibilities:
    - Simulated keyword-based answers for running without a model
    - Agno agent with OpenAI-compatible models for real answers
    - Prompt construction from the resume text and the question
"""

from resume_chat.agent.config import ResponderConfig, ResponderKind, get_responder_config
from resume_chat.agent.responders import (
    AgentResponder,
    SimulatedResponder,
    build_prompt,
    create_responder,
    get_responder,
)

__all__ = [
    "AgentResponder",
    "ResponderConfig",
    "ResponderKind",
    "SimulatedResponder",
    "build_prompt",
    "create_responder",
    "get_responder",
    "get_responder_config",
]
