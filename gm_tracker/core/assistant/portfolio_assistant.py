"""
Portfolio assistant backed by Gemini.

Produces an executive summary of the whole portfolio and a stakeholder
status email for a single project. Every failure is reported as a
fixed fallback string so callers can render the result directly.

Dependencies: langchain_google_genai, langchain_core
System role: Generative text service for the GM console
"""

import json
import logging
from typing import Any

from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from gm_tracker.configs.assistant import AssistantSettings
from gm_tracker.core.assistant.prompts import (
    PORTFOLIO_ANALYSIS_PROMPT,
    PROJECT_REPORT_PROMPT,
)
from gm_tracker.models.project import Project

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "API Key not configured."
NO_ANALYSIS_MESSAGE = "No analysis generated."
NO_REPORT_MESSAGE = "No report generated."
ANALYSIS_FAILED_MESSAGE = "Unable to generate analysis at this time."
REPORT_FAILED_MESSAGE = "Unable to generate report."


def _plain(value: Any) -> Any:
    return getattr(value, "value", value)


def _response_text(content: Any) -> str:
    """Flatten chat model content (string or list of parts) to text."""
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts).strip()
    return ""


class PortfolioAssistant:
    """Gemini-backed text generation for portfolio and project reports.

    Usage:
        assistant = PortfolioAssistant.from_settings(settings.assistant)
        summary = await assistant.get_portfolio_analysis(projects)
    """

    def __init__(self, model: Any | None = None) -> None:
        """
        Initialize the assistant.

        Args:
            model: Chat model exposing ``ainvoke``; None means no API key
                is configured and every call returns the fallback text.
        """
        self._model = model

    @classmethod
    def from_settings(cls, settings: AssistantSettings) -> "PortfolioAssistant":
        """Build an assistant; without an API key the model is left unset."""
        if not settings.is_configured:
            logger.info(f"{__name__}:from_settings - Gemini API key not configured")
            return cls(model=None)

        model = ChatGoogleGenerativeAI(
            model=settings.model,
            google_api_key=settings.api_key,
            temperature=settings.temperature,
        )
        logger.info(f"{__name__}:from_settings - Initialized assistant with {settings.model}")
        return cls(model=model)

    @property
    def is_configured(self) -> bool:
        return self._model is not None

    async def get_portfolio_analysis(self, projects: list[Project]) -> str:
        """
        Summarize the portfolio for the General Manager.

        Only name, status, value and notes are sent to the model.

        Args:
            projects: Projects to summarize

        Returns:
            str: Generated summary or a fallback message
        """
        if not self.is_configured:
            return NOT_CONFIGURED_MESSAGE

        summary = [
            {
                "name": p.name,
                "status": _plain(p.status),
                "value": p.value,
                "notes": p.notes,
            }
            for p in projects
        ]
        prompt = PORTFOLIO_ANALYSIS_PROMPT.format(data=json.dumps(summary))

        try:
            response = await self._model.ainvoke([HumanMessage(content=prompt)])
            text = _response_text(response.content)
            logger.info(
                f"{__name__}:get_portfolio_analysis - Generated analysis",
                extra={"project_count": len(projects), "chars": len(text)},
            )
            return text or NO_ANALYSIS_MESSAGE
        except Exception as e:
            logger.error(
                f"{__name__}:get_portfolio_analysis - {type(e).__name__}: {e}"
            )
            return ANALYSIS_FAILED_MESSAGE

    async def get_project_report(self, project: Project) -> str:
        """
        Draft a stakeholder status email for one project.

        Args:
            project: Project to report on

        Returns:
            str: Generated email body or a fallback message
        """
        if not self.is_configured:
            return NOT_CONFIGURED_MESSAGE

        prompt = PROJECT_REPORT_PROMPT.format(
            name=project.name,
            customer_name=project.customer_name,
            status=_plain(project.status),
            value=project.value,
            notes=project.notes,
        )

        try:
            response = await self._model.ainvoke([HumanMessage(content=prompt)])
            text = _response_text(response.content)
            return text or NO_REPORT_MESSAGE
        except Exception as e:
            logger.error(
                f"{__name__}:get_project_report - {type(e).__name__}: {e}",
                extra={"project_id": project.id},
            )
            return REPORT_FAILED_MESSAGE
