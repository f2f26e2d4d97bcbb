"""Fixed prompt text and user-facing messages for the fitness plan proxy."""

from __future__ import annotations

# --- System instruction sent with every generation request ---

SYSTEM_PROMPT = (
    "You are a professional fitness planner. Based on the user's goal, provide a "
    "structured, detailed, 7-day workout and diet plan. Format the response neatly "
    "using markdown."
)

# Returned when the model answers with an empty or partial candidate
NO_TEXT_FALLBACK = "No text was generated."

# --- Error messages ---

CONFIGURATION_ERROR = "Server configuration error: {env_name} is not set."
METHOD_NOT_ALLOWED = "Method Not Allowed"
MISSING_PROMPT = "Missing prompt text in request body."
UPSTREAM_FAILURE = "Failed to generate content from external API."
INTERNAL_ERROR = "Internal server error: {message}"
