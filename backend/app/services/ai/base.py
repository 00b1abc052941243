"""Schema-validated prompt flows.

A flow renders a prompt from a validated input model, asks the hosted model
for JSON, and validates the reply against an output model. There is no retry:
a reply that is empty, not JSON, or off-schema counts as "no structured
output" and the flow either returns its fallback or raises.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from app.observability.metrics import timed
from app.observability.tracing import trace
from app.services.ai import client as llm_client
from app.services.ai.error_handler import execute_ai_flow
from app.services.ai.errors import FlowGenerationError

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


class FlowModel(BaseModel):
    """Base for flow inputs and outputs: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def to_json(value: Any) -> str:
    """Serialize prompt context the way the web client does (two-space indent)."""
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, mode="json", exclude_none=True)
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


@dataclass
class Flow(Generic[InputT, OutputT]):
    name: str
    input_model: Type[InputT]
    output_model: Type[OutputT]
    build_prompt: Callable[[InputT], str]
    failure_message: str
    error_context: Optional[str] = None
    fallback: Optional[Callable[[InputT], OutputT]] = None
    system_prompt: Optional[str] = None
    model: Optional[str] = None

    def __call__(self, payload: InputT | dict) -> OutputT:
        if self.error_context:
            return execute_ai_flow(lambda: self._run(payload), self.error_context)
        return self._run(payload)

    def render_prompt(self, data: InputT) -> str:
        schema_json = json.dumps(self.output_model.model_json_schema(by_alias=True), indent=2)
        return (
            f"{self.build_prompt(data).strip()}\n\n"
            "### OUTPUT REQUIREMENT\n"
            "Return strictly valid JSON matching this schema:\n"
            f"{schema_json}"
        )

    def parse_output(self, content: Optional[str]) -> Optional[OutputT]:
        if not content or not content.strip():
            return None
        try:
            return self.output_model.model_validate_json(content)
        except ValidationError as exc:
            logger.warning("Flow %s returned output that failed validation: %s", self.name, exc.errors()[:3])
            return None

    def _run(self, payload: InputT | dict) -> OutputT:
        data = payload if isinstance(payload, self.input_model) else self.input_model.model_validate(payload)
        prompt = self.render_prompt(data)
        with timed(f"flow.{self.name}"):
            with trace(f"flow.{self.name}", metadata={"flow": self.name, "prompt_chars": len(prompt)}):
                content = llm_client.complete_json(self.system_prompt, prompt, model=self.model)
            output = self.parse_output(content)
            if output is None:
                if self.fallback is None:
                    raise FlowGenerationError(self.failure_message)
                logger.info("Flow %s produced no output; using fallback", self.name)
                output = self.fallback(data)
        return output
