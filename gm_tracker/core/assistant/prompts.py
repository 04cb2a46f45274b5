"""
Portfolio assistant prompts.

Prompt templates for the executive portfolio summary and the
per-project stakeholder status email.

Dependencies: langchain_core.prompts
System role: Prompt templates for the portfolio assistant
"""

from langchain_core.prompts import PromptTemplate

PORTFOLIO_ANALYSIS_PROMPT = PromptTemplate.from_template(
    """You are an executive assistant to a General Manager.
Analyze the following project portfolio data and provide a concise executive summary.
Focus on:
1. Overall health of the portfolio.
2. Any high-value projects that might be at risk (based on notes or status).
3. A quick financial outlook.

Keep it professional, brief (under 150 words), and actionable. Use bullet points.

Data: {data}"""
)

PROJECT_REPORT_PROMPT = PromptTemplate.from_template(
    """Draft a short, professional status update email for the project "{name}".

Project Details:
- Customer: {customer_name}
- Status: {status}
- Value: {value}
- Current Notes: {notes}

The email should be addressed to the stakeholders. Highlight progress and any blockers."""
)
