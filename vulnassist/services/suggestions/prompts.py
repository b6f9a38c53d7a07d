"""
Prompts for the suggestion flows.
"""

from langchain_core.prompts import PromptTemplate

REMEDIATION_STEPS_PROMPT = PromptTemplate.from_template(
    """You are an AI assistant specializing in cybersecurity remediation.
Based on the following vulnerability description, suggest potential remediation steps:

Vulnerability Description: {vulnerability_description}

Remediation Steps:"""
)

RISK_LEVEL_PROMPT = PromptTemplate.from_template(
    """Based on the following vulnerability description, suggest a risk level (Low, Medium, High, Critical).

Vulnerability Description: {vulnerability_description}

Suggest Risk Level:"""
)
