"""Generative text assistant for portfolio summaries and status reports."""

from gm_tracker.core.assistant.portfolio_assistant import PortfolioAssistant

__all__ = ["PortfolioAssistant"]
