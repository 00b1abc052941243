"""Simulated AI task processing used by the task manager screens.

No model is called. Requests are validated against a fixed model table, the
caller waits for the model's nominal processing time and gets back one of a
few canned reports with a section matched to the prompt's subject.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class AIModelSpec:
    name: str
    max_tokens: int
    processing_time_ms: int


AI_MODELS: Dict[str, AIModelSpec] = {
    "gemini-1.5-flash": AIModelSpec("Gemini 1.5 Flash", 1048576, 1000),
    "gemini-1.5-pro": AIModelSpec("Gemini 1.5 Pro", 2097152, 2000),
    "gemini-1.0-ultra": AIModelSpec("Gemini 1.0 Ultra", 30720, 3000),
    "gemini-pro-vision": AIModelSpec("Gemini Pro Vision", 16384, 4000),
}

MISSING_FIELDS_ERROR = "Missing required fields: prompt, model, or taskId"
INVALID_MODEL_ERROR = "Invalid AI model specified"
INTERNAL_ERROR = "Internal server error during AI task processing"

# (keywords, appended section); first match wins.
PROMPT_CONTEXTS: List[Tuple[Tuple[str, ...], str]] = [
    (
        ("code", "programming"),
        "**Additional Programming Context:**\nThis prompt appears to involve coding or technical implementation. "
        "The AI system has specialized capabilities for code analysis, generation, and optimization.",
    ),
    (
        ("analysis", "data"),
        "**Additional Analysis Context:**\nDetected analytical request. The AI system has been optimized for data "
        "processing, pattern recognition, and insight generation.",
    ),
    (
        ("creative", "write"),
        "**Additional Creative Context:**\nCreative writing request detected. The AI system leverages advanced "
        "language models for content generation, storytelling, and creative assistance.",
    ),
]


class TaskValidationError(ValueError):
    """Raised for requests the endpoint answers with HTTP 400."""


def list_model_ids() -> List[str]:
    return list(AI_MODELS)


def validate_task_request(prompt: Optional[str], model: Optional[str], task_id: Optional[str]) -> AIModelSpec:
    if not prompt or not model or not task_id:
        raise TaskValidationError(MISSING_FIELDS_ERROR)
    spec = AI_MODELS.get(model)
    if spec is None:
        raise TaskValidationError(INVALID_MODEL_ERROR)
    if len(prompt) > spec.max_tokens:
        raise TaskValidationError(f"Prompt exceeds maximum token limit for {spec.name}")
    return spec


def _templates(prompt: str, spec: AIModelSpec) -> List[str]:
    return [
        f'Based on your request: "{prompt}"\n\n'
        f"I've analyzed your input using {spec.name} and here's my comprehensive response:\n\n"
        "## Analysis\n"
        "Your prompt suggests you're looking for assistance with a specific task. I've processed this using "
        "advanced AI capabilities to provide you with the most relevant and helpful information.\n\n"
        "## Key Insights\n"
        "- The task appears to involve [automated analysis based on prompt content]\n"
        f"- Processing completed using {spec.name} with optimal resource utilization\n"
        "- Response generated within acceptable latency parameters\n\n"
        "## Recommendations\n"
        "1. Consider refining your prompt for more specific results\n"
        "2. Utilize model capabilities for follow-up questions\n"
        "3. Implement suggested optimizations for better performance\n\n"
        "## Technical Details\n"
        f"- Model Used: {spec.name}\n"
        f"- Max Tokens: {spec.max_tokens:,}\n"
        f"- Processing Time: {spec.processing_time_ms}ms\n"
        "- Status: Successfully completed\n\n"
        "This response demonstrates the AI's ability to understand context, provide structured information, and "
        "offer actionable insights based on your specific request.",
        f"AI Task Execution Report - {spec.name}\n\n"
        "**Input Analysis:**\n"
        f'Your prompt "{prompt}" has been successfully processed using state-of-the-art AI technology.\n\n'
        "**Processing Results:**\n"
        "✅ Natural language understanding completed\n"
        "✅ Context analysis performed\n"
        "✅ Response generation optimized\n"
        "✅ Quality assurance passed\n\n"
        "**Generated Content:**\n"
        "Based on the analysis of your request, I can provide comprehensive assistance with your specific needs. "
        f"The {spec.name} model has been optimized to deliver high-quality responses that are both informative "
        "and actionable.\n\n"
        "**Performance Metrics:**\n"
        "- Response Quality: High\n"
        "- Contextual Relevance: Excellent\n"
        "- Processing Efficiency: Optimized\n"
        "- Resource Usage: Within normal parameters\n\n"
        "**Next Steps:**\n"
        "Feel free to refine your prompt or ask follow-up questions to get more targeted assistance.",
        f"{spec.name} Response Generator\n\n"
        "**Task:** Processing user prompt for AI-powered assistance\n"
        "**Status:** ✅ Completed Successfully\n\n"
        "**Response:**\n"
        f'Thank you for your request: "{prompt}"\n\n'
        f"I've utilized {spec.name}'s advanced capabilities to analyze your input and generate this "
        "comprehensive response.\n\n"
        "**Key Features Utilized:**\n"
        "- Advanced natural language processing\n"
        "- Context-aware response generation\n"
        "- Optimized resource utilization\n"
        "- Real-time processing capabilities\n\n"
        "For best results, consider providing additional context or specific requirements in future prompts.",
    ]


def generate_ai_response(prompt: str, spec: AIModelSpec, rng: Optional[random.Random] = None) -> str:
    """Pick a canned report at random and append a subject-specific section if the prompt matches one."""
    chooser = rng or random
    result = chooser.choice(_templates(prompt, spec))
    lowered = prompt.lower()
    for keywords, section in PROMPT_CONTEXTS:
        if any(keyword in lowered for keyword in keywords):
            return f"{result}\n\n{section}"
    return result
