"""Destination photo generation."""
from __future__ import annotations

from pydantic import Field

from app.observability.metrics import timed
from app.observability.tracing import trace
from app.services.ai import client as llm_client
from app.services.ai.base import FlowModel
from app.services.ai.errors import FlowGenerationError

IMAGE_FAILURE_MESSAGE = "Image generation failed to return a valid image."


class GenerateTravelImageInput(FlowModel):
    destination: str = Field(..., min_length=1, description='The travel destination, e.g., "Paris, France".')


class GenerateTravelImageOutput(FlowModel):
    image_data_uri: str = Field(..., description="The generated image as a data URI.")


def build_image_prompt(destination: str) -> str:
    return (
        f"A beautiful, high-quality, vibrant travel photograph of {destination}. "
        "Cinematic, professional photography."
    )


def generate_travel_image(payload: GenerateTravelImageInput | dict) -> GenerateTravelImageOutput:
    data = (
        payload
        if isinstance(payload, GenerateTravelImageInput)
        else GenerateTravelImageInput.model_validate(payload)
    )
    with timed("flow.generate_travel_image"):
        with trace("flow.generate_travel_image", metadata={"destination": data.destination}):
            image_uri = llm_client.generate_image(build_image_prompt(data.destination))
        if not image_uri:
            raise FlowGenerationError(IMAGE_FAILURE_MESSAGE)
    return GenerateTravelImageOutput(image_data_uri=image_uri)
