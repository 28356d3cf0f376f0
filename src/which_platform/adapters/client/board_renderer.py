"""Plain-text rendering of the departure board."""

import math
import re
from datetime import datetime
from typing import Any

from which_platform.adapters.client.client_state import ClientState
from which_platform.domain.models.leg import parse_instant
from which_platform.domain.models.stop import Stop

_STATION_SUFFIX = re.compile(r" Station.*")


def minutes_text(minutes: int) -> str:
    if minutes <= 0:
        return "NOW"
    if minutes == 1:
        return "1 min"
    return f"{minutes} min"


def time_ago(last_fetch: datetime | None, now: datetime) -> str:
    """'Updated just now', 'Updated 12s ago' or 'Updated 3m ago'."""
    if last_fetch is None:
        return ""
    seconds = math.floor((now - last_fetch).total_seconds() + 0.5)
    if seconds < 5:
        return "Updated just now"
    if seconds < 60:
        return f"Updated {seconds}s ago"
    return f"Updated {seconds // 60}m ago"


def upcoming(departures: list[dict[str, Any]], now: datetime) -> list[dict[str, Any]]:
    """Departures with minutes-until recomputed for ``now``, dropping departed ones."""
    result = []
    for departure in departures:
        instant = parse_instant(departure.get("departureTime"))
        if instant is None:
            continue
        minutes = math.floor((instant - now).total_seconds() / 60 + 0.5)
        if minutes >= 0:
            result.append({**departure, "minutesUntilDeparture": minutes})
    return result


def meta_badges(departure: dict[str, Any]) -> list[str]:
    """Secondary facts shown under a departure."""
    badges = []
    if departure.get("isRealtime"):
        badges.append("●")
    if departure.get("delayMinutes", 0) > 0:
        badges.append(f"+{departure['delayMinutes']}m late")
    if departure.get("boardingStation"):
        badges.append(f"board at {_STATION_SUFFIX.sub('', departure['boardingStation'])}")
    if departure.get("interchanges", 0) > 0:
        badges.append(f"{departure['interchanges']} change")
    stops = departure.get("numberOfStops")
    if stops:
        badges.append(f"{stops} stop{'s' if stops != 1 else ''}")
    if departure.get("durationMinutes") is not None:
        badges.append(f"{departure['durationMinutes']}m")
    badges.append(f"arr {departure.get('arrivalTimeLocal', '?')}")
    return badges


def render_departure(departure: dict[str, Any]) -> str:
    platform = str(departure.get("platform", "?")).replace("Platform ", "")
    header = (
        f"{departure.get('departureTimeLocal', '?'):>5}  "
        f"{minutes_text(departure['minutesUntilDeparture']):>6}  "
        f"Platform {platform:<3} "
        f"[{departure.get('line', '?')}] {departure.get('trainDestination', '')}"
    )
    return f"{header}\n        {'  '.join(meta_badges(departure))}"


def render_board(state: ClientState, now: datetime) -> str:
    """Render the whole board for the current state."""
    title = f"{state.settings.origin_name} → {state.settings.destination_name}"
    lines = [title, time_ago(state.last_fetch_time, now), ""]

    if state.no_data:
        lines.append("No data available. Retrying soon...")
    elif state.loading and not state.departures:
        lines.append("Loading...")
    elif not state.departures:
        lines.extend(["No upcoming trains", "Check back later"])
    else:
        visible = upcoming(state.departures, now)
        if not visible:
            lines.extend(["No upcoming trains", "Refreshing soon..."])
        lines.extend(render_departure(departure) for departure in visible)

    return "\n".join(lines)


def render_search_results(stops: list[Stop]) -> str:
    if not stops:
        return "No stations found"
    return "\n".join(
        f"{number:>3}. {stop.disassembled_name}" for number, stop in enumerate(stops, 1)
    )
