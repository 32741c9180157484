"""Responders that stream answers to resume questions.

Every responder exposes ``stream_response(question, resume)``, an async
generator of text fragments. The WebSocket handler forwards each fragment
as one frame and appends the end token itself.

Two implementations:

1. **SimulatedResponder** - canned answers picked by keywords in the
   question. Needs no model and is the default.
2. **AgentResponder** - Agno agent over an OpenAI-compatible chat model.
   The resume text is placed in front of the question, so the agent keeps
   no storage or knowledge base of its own.
"""

import asyncio
import logging
import re
from collections.abc import AsyncGenerator

from agno.agent import Agent
from agno.models.openai import OpenAIChat

from resume_chat.agent.config import ResponderConfig, ResponderKind, get_responder_config

logger = logging.getLogger(__name__)


def build_prompt(question: str, resume: str | None) -> str:
    """Prefix the question with the resume text when one is available."""
    if resume:
        return f"Based on the following resume:\n\n{resume}\n\n---\n\n{question}"
    return question


SKILLS_ANSWER = (
    "Based on the resume, the key skills include:\n\n"
    "• **Technical Skills**: JavaScript, TypeScript, React, Node.js, Python\n"
    "• **Soft Skills**: Leadership, Problem-solving, Communication\n"
    "• **Tools**: Git, Docker, AWS, Figma\n\n"
    "The candidate demonstrates a strong full-stack development background "
    "with emphasis on modern web technologies."
)

EXPERIENCE_ANSWER = (
    "The resume shows progressive career growth:\n\n"
    "**Senior Developer** at Tech Corp (2021-Present)\n"
    "• Led a team of 5 developers on a major product redesign\n"
    "• Improved application performance by 40%\n\n"
    "**Developer** at StartupXYZ (2019-2021)\n"
    "• Built core features for the main product\n"
    "• Collaborated with cross-functional teams\n\n"
    "Total experience: 5+ years in software development."
)

EDUCATION_ANSWER = (
    "**Education Background:**\n\n"
    "**Bachelor of Science in Computer Science**\n"
    "University of Technology, 2019\n"
    "GPA: 3.8/4.0\n\n"
    "**Certifications:**\n"
    "• AWS Certified Developer\n"
    "• Google Cloud Professional\n\n"
    "The candidate has a solid academic foundation complemented by "
    "industry-recognized certifications."
)

SUMMARY_ANSWER = (
    "**Resume Summary:**\n\n"
    "This is a well-qualified candidate with 5+ years of experience in "
    "full-stack development. Key highlights:\n\n"
    "• Strong technical skills in modern web technologies\n"
    "• Proven leadership experience\n"
    "• Excellent educational background\n"
    "• Industry certifications from major cloud providers\n\n"
    "The candidate appears well-suited for senior developer or technical "
    "lead positions."
)

DEFAULT_ANSWER = (
    "I've analyzed the resume and can help you understand various aspects. "
    "Here are some questions you might want to ask:\n\n"
    "• What are the key technical skills?\n"
    "• Can you summarize the work experience?\n"
    "• What's the educational background?\n"
    "• What makes this candidate stand out?\n\n"
    "Feel free to ask any specific questions about the resume!"
)

# First matching keyword group wins
_SIMULATED_ANSWERS: list[tuple[tuple[str, ...], str]] = [
    (("skill",), SKILLS_ANSWER),
    (("experience", "work"), EXPERIENCE_ANSWER),
    (("education", "degree"), EDUCATION_ANSWER),
    (("summary", "overview"), SUMMARY_ANSWER),
]


def simulated_answer(question: str) -> str:
    """Pick a canned answer by case-insensitive substring match."""
    lowered = question.lower()
    for keywords, answer in _SIMULATED_ANSWERS:
        if any(keyword in lowered for keyword in keywords):
            return answer
    return DEFAULT_ANSWER


def split_fragments(text: str) -> list[str]:
    """Split text into word-sized fragments that concatenate back to it."""
    return re.findall(r"\S+\s*|\s+", text)


class SimulatedResponder:
    """Streams a canned answer word by word."""

    def __init__(self, delay: float = 0.0) -> None:
        self._delay = delay

    async def stream_response(
        self,
        question: str,
        resume: str | None = None,
    ) -> AsyncGenerator[str]:
        for fragment in split_fragments(simulated_answer(question)):
            if self._delay:
                await asyncio.sleep(self._delay)
            yield fragment


class AgentResponder:
    """Streams answers from an Agno agent."""

    def __init__(self, config: ResponderConfig) -> None:
        self._config = config
        self._agent = self._create_agent()

    def _create_agent(self) -> Agent:
        model = OpenAIChat(
            id=self._config.model_name,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

        return Agent(
            model=model,
            description="An assistant that answers questions about an uploaded resume.",
            instructions=[
                "Answer only from the resume provided in the message.",
                "Say so when the resume does not contain the requested information.",
                "Be concise yet thorough.",
            ],
            markdown=True,
        )

    async def stream_response(
        self,
        question: str,
        resume: str | None = None,
    ) -> AsyncGenerator[str]:
        """Yield response text chunks as they arrive from the model."""
        response_stream = self._agent.arun(build_prompt(question, resume), stream=True)
        async for chunk in response_stream:
            if hasattr(chunk, "content") and chunk.content:
                yield chunk.content


Responder = SimulatedResponder | AgentResponder

# Module-level singleton instance
_responder: Responder | None = None


def create_responder(config: ResponderConfig | None = None) -> Responder:
    """Build the responder selected by configuration."""
    config = config or get_responder_config()
    if config.kind is ResponderKind.AGENT:
        logger.info(f"Using agent responder with model {config.model_name}")
        return AgentResponder(config)
    logger.info("Using simulated responder")
    return SimulatedResponder(delay=config.simulated_delay)


def get_responder() -> Responder:
    """Get or create the global responder."""
    global _responder
    if _responder is None:
        _responder = create_responder()
    return _responder
