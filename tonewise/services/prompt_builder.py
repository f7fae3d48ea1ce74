# tonewise/services/prompt_builder.py

import logging
from typing import List

from langchain_core.prompts import PromptTemplate

logger = logging.getLogger(__name__)

NO_CONTEXT_PLACEHOLDER = "No additional context provided"

# Названия и порядок секций - контракт с моделью: confidence_parser ищет "Confidence Level"
SINGLE_ANALYSIS_TEMPLATE = PromptTemplate.from_template(
    """Please analyze this social interaction for tone, intent, and potential subtext. 
This analysis is to help someone understand social communication better.

Context: {context}

Message/Interaction: "{message}"

Please provide a clear, helpful analysis that includes:

**Overall Tone**: Describe the general emotional tone (supportive, neutral, concerned, etc.)

**Likely Intent**: What the person probably meant to communicate

**Potential Concerns**: Any aspects that might be interpreted differently, if any

**Confidence Level**: How confident you are in this interpretation (High/Medium/Low)

**Red Flags**: Any concerning language or potential negative implications, if any

**Positive Indicators**: Signs of genuine care, support, or positive intent

**Bottom Line**: A clear, direct summary of what this message likely means

Be honest, clear, and helpful. Focus on practical insights that help someone understand the communication better."""
)

COMPARISON_TEMPLATE = PromptTemplate.from_template(
    """Please analyze this sequence of interactions to identify patterns in tone and relationship dynamics.

Context: {context}

Messages:
{messages}

Please provide a comprehensive analysis that includes:

**Pattern Analysis**: How does the tone evolve across these messages?

**Relationship Dynamic**: What does this suggest about the relationship between the people involved?

**Consistency Check**: Are the messages consistent in tone and intent?

**Overall Assessment**: Is this a positive, neutral, or concerning interaction pattern?

**Key Insights**: What are the most important takeaways from this sequence?

**Bottom Line**: A clear summary of what this pattern of communication suggests

Focus on helping understand the social dynamics and communication patterns at play."""
)


def build_single_analysis_prompt(message: str, context: str = "") -> str:
    """Промпт анализа одного сообщения: семь секций, включая Confidence Level."""
    prompt = SINGLE_ANALYSIS_TEMPLATE.format(
        message=message,
        context=context or NO_CONTEXT_PLACEHOLDER
    )
    logger.debug("[build_single_analysis_prompt] -> prompt length=%d", len(prompt))
    return prompt


def format_numbered_messages(messages: List[str]) -> str:
    return "\n\n".join(f'Message {i}: "{msg}"' for i, msg in enumerate(messages, start=1))


def build_comparison_prompt(messages: List[str], context: str = "") -> str:
    """Промпт сравнения последовательности сообщений: сообщения нумеруются в исходном порядке."""
    prompt = COMPARISON_TEMPLATE.format(
        messages=format_numbered_messages(messages),
        context=context or NO_CONTEXT_PLACEHOLDER
    )
    logger.debug("[build_comparison_prompt] -> %d messages, prompt length=%d", len(messages), len(prompt))
    return prompt
