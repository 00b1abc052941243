"""Seed AppData document written for first-time users."""
from __future__ import annotations

import copy
from typing import Any, Dict

INITIAL_APP_DATA: Dict[str, Any] = {
    "goals": [
        {
            "id": "goal-1",
            "title": "Switch to a higher-paying QA automation role",
            "description": "Land an automation-focused role with better pay by the end of the year.",
            "category": "Career",
            "deadline": "2025-12-31T00:00:00.000Z",
            "steps": [
                {"id": "goal-1-step-1", "text": "Refine resume and prepare 3 cover letter templates", "completed": False},
                {"id": "goal-1-step-2", "text": "Finish an API testing course", "completed": False},
                {"id": "goal-1-step-3", "text": "Apply to 12-15 carefully selected openings", "completed": False},
            ],
        },
        {
            "id": "goal-2",
            "title": "Grow emergency fund to 40K",
            "description": "Build a cushion that covers at least two months of essentials.",
            "category": "Personal",
            "deadline": "2025-12-31T00:00:00.000Z",
            "steps": [
                {"id": "goal-2-step-1", "text": "Create a monthly budget envelope", "completed": False},
                {"id": "goal-2-step-2", "text": "Automate a fixed transfer on payday", "completed": False},
            ],
        },
        {
            "id": "goal-3",
            "title": "Build a public automation portfolio",
            "description": "Publish three structured test automation projects on GitHub.",
            "category": "Career",
            "deadline": "2025-11-30T00:00:00.000Z",
            "steps": [
                {"id": "goal-3-step-1", "text": "Set up a UI test framework repository", "completed": False},
                {"id": "goal-3-step-2", "text": "Add an API test suite with CI", "completed": False},
            ],
        },
    ],
    "monthlyPlan": [
        {
            "month": "July 2025",
            "theme": "Reset & Rebuild: audit finances and set the upskilling roadmap",
            "tasks": [
                {"text": "Create a budget envelope (EMIs, groceries, savings, job hunting)", "done": False},
                {"text": "Choose a specialization: API testing or mobile automation", "done": False},
                {"text": "Start a structured course for the chosen specialization", "done": False},
            ],
        },
        {
            "month": "August 2025",
            "theme": "Learning + Preparation: build confidence for new roles",
            "tasks": [
                {"text": "Finish the specialization course", "done": False},
                {"text": "Shortlist 15 target companies", "done": False},
                {"text": "Update LinkedIn headline and skills keywords", "done": False},
            ],
        },
        {
            "month": "September 2025",
            "theme": "Interviews & Certifications: job-ready polish",
            "tasks": [
                {"text": "Start certification preparation", "done": False},
                {"text": "Do two mock interviews", "done": False},
                {"text": "Write 3-5 STAR stories from past projects", "done": False},
            ],
        },
    ],
    "carSaleChecklist": [
        {"id": "cs-1", "text": "Request the official foreclosure letter from the lender", "done": False},
        {"id": "cs-2", "text": "Collect all documents (RC, insurance, PUC, service records)", "done": False},
        {"id": "cs-3", "text": "Get quotes from multiple platforms", "done": False},
        {"id": "cs-4", "text": "Finalize the buyer and agree on price", "done": False},
        {"id": "cs-5", "text": "Coordinate with the buyer to pay off the loan directly", "done": False},
        {"id": "cs-6", "text": "Complete the RC transfer", "done": False},
        {"id": "cs-7", "text": "Receive loan closure confirmation and NOC", "done": False},
        {"id": "cs-8", "text": "Receive the balance payment from the buyer", "done": False},
    ],
    "carSalePrice": "550000",
    "carLoanPayoff": "402450",
    "loans": [
        {"id": "loan-1", "name": "Car Loan", "principal": "394558", "status": "Active"},
        {"id": "loan-2", "name": "Personal Loan", "principal": "0", "status": "Active"},
    ],
    "jobApplications": [],
    "emergencyFund": "0",
    "emergencyFundTarget": "40000",
    "sips": [],
    "travelGoals": [],
    "dailyTasks": [],
    "incomeSources": [
        {"id": "income-1", "name": "Primary Job", "amount": "50000"},
    ],
}

DEFAULT_INCOME_SOURCES = [{"id": "income-1", "name": "Primary Job", "amount": "50000"}]


def initial_app_data() -> Dict[str, Any]:
    """Return a fresh, mutable copy of the seed document."""
    return copy.deepcopy(INITIAL_APP_DATA)
