"""Greeting handler: time-of-day aware salutations."""

from datetime import datetime

from models.arguments import GreetingArguments
from models.data_models import ToolResult


def current_hour() -> int:
    """Return the local wall-clock hour (0-23)."""
    return datetime.now().hour


def salutation_for_hour(hour: int) -> str:
    """Pick the salutation band for an hour of the day."""
    if hour < 12:
        return "Good morning"
    if hour < 18:
        return "Good afternoon"
    return "Good evening"


def build_greeting(name: str, formal: bool, hour: int) -> str:
    salutation = salutation_for_hour(hour)
    if formal:
        return (
            f"{salutation}, {name}. It is a pleasure to greet you. "
            "I hope you have an excellent day."
        )
    return f"{salutation} {name}! How are you? I hope you have a great day!"


def handle_greeting(args: GreetingArguments) -> ToolResult:
    """Greet ``args.name``; the hour is read on every call."""
    return ToolResult.text(build_greeting(args.name, args.formal, current_hour()))
