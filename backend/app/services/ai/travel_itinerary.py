"""Budget-friendly day-by-day travel itinerary."""
from __future__ import annotations

from typing import List

from pydantic import Field

from app.services.ai.base import Flow, FlowModel


class GenerateTravelItineraryInput(FlowModel):
    destination: str = Field(..., min_length=1, description='The travel destination, e.g., "Goa, India".')
    duration: int = Field(..., gt=0, description="The trip length in days.")


class ItineraryActivity(FlowModel):
    name: str = Field(..., description="The activity or place to visit.")
    description: str = Field(..., description="A brief, helpful description of the activity.")


class ItineraryDay(FlowModel):
    day: int = Field(..., description="The day number, starting at 1.")
    title: str = Field(..., description='A title such as "Day 1: Arrival and Exploration".')
    theme: str
    activities: List[ItineraryActivity] = Field(..., description="3-4 specific activities for the day.")


class GenerateTravelItineraryOutput(FlowModel):
    general_tips: List[str] = Field(..., description="Advice on budget flights and accommodation.")
    days: List[ItineraryDay]


def _build_prompt(payload: GenerateTravelItineraryInput) -> str:
    return (
        f"You are an expert budget travel agent. A user wants to travel to {payload.destination} for "
        f"{payload.duration} days.\n\n"
        "Your task is to create a detailed, day-by-day, budget-friendly travel plan.\n\n"
        "**General Guidelines:**\n"
        "1. **Budget Focus:** Suggest free or low-cost activities, affordable local food spots, and efficient "
        "public transportation options.\n"
        "2. **Practicality:** Group activities logically by location for each day to minimize travel time.\n"
        "3. **Variety:** Include a mix of popular attractions, local experiences, and some relaxation time.\n\n"
        "**Structure:**\n"
        "- First, provide a section with **General Tips** covering advice on finding budget flights and "
        f"accommodation suitable for {payload.destination}.\n"
        f"- Then, create a detailed plan for each day of the {payload.duration}-day trip.\n"
        "- For each day, provide a title, a theme, and a list of 3-4 specific activities or places to visit, "
        "each with a brief, helpful description."
    )


generate_travel_itinerary = Flow(
    name="generate_travel_itinerary",
    input_model=GenerateTravelItineraryInput,
    output_model=GenerateTravelItineraryOutput,
    build_prompt=_build_prompt,
    failure_message="The AI model failed to generate a travel itinerary. This may be a temporary issue.",
)
