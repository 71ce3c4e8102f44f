"""Date/time handler: renders the current instant in a requested timezone."""

from datetime import datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from models.arguments import DEFAULT_TIMEZONE, DateTimeArguments
from models.data_models import ToolResult

# Fixed English names so output does not depend on the process locale
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def resolve_timezone(name: str) -> tzinfo:
    """Look up an IANA timezone.

    Raises:
        ValueError: If the identifier is unknown or malformed
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, OSError) as e:
        # OSError covers directories and over-long keys; its text names the tzdata path
        raise ValueError(f"Unknown timezone: {name}") from e
    except ValueError as e:
        raise ValueError(f"Invalid timezone identifier {name!r}: {e}") from e


def _long_date(moment: datetime) -> str:
    return f"{WEEKDAYS[moment.weekday()]}, {moment.day} {MONTHS[moment.month - 1]} {moment.year}"


def format_moment(moment: datetime, fmt: str) -> str:
    """Render an aware datetime in one of the supported formats."""
    if fmt == "short":
        return moment.strftime("%d/%m/%Y")
    if fmt == "time":
        return moment.strftime("%H:%M:%S")
    if fmt == "full":
        return f"{_long_date(moment)} at {moment.strftime('%H:%M:%S')}"
    if fmt == "iso":
        utc = moment.astimezone(timezone.utc)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return _long_date(moment)


def handle_datetime(args: DateTimeArguments, now: Optional[datetime] = None) -> ToolResult:
    """Describe the current date in ``args.timezone``.

    Args:
        args: Validated arguments
        now: Aware instant to render; defaults to the current time

    Raises:
        ValueError: If the timezone cannot be resolved or the date cannot be formatted
    """
    try:
        zone = resolve_timezone(args.timezone)
        moment = (now or datetime.now(timezone.utc)).astimezone(zone)
        formatted = format_moment(moment, args.format)
    except ValueError as e:
        raise ValueError(f"Error formatting date: {e}") from e

    zone_info = f" (timezone: {args.timezone})" if args.timezone != DEFAULT_TIMEZONE else ""
    return ToolResult.text(f"The current date is: {formatted}{zone_info}")
