"""Command line interface for Which Platform?."""

import argparse
import asyncio
import json
import logging
import sys

import aiohttp

from which_platform.adapters.client import BoardController, DeparturesApiClient, JsonSettingsStore
from which_platform.adapters.client.board_controller import COMMAND_HELP
from which_platform.adapters.config import AppConfig
from which_platform.adapters.tfnsw_api import (
    TfnswHttpClient,
    TfnswStopRepository,
    TfnswTripPlannerRepository,
)
from which_platform.application.services import (
    DepartureBoard,
    DepartureListBuilder,
    DepartureService,
    JourneyNormalizer,
    StopSearchService,
)
from which_platform.domain.errors import UpstreamUnavailableError
from which_platform.domain.models import ClientSettings

logger = logging.getLogger(__name__)


def _http_client(session: aiohttp.ClientSession, config: AppConfig) -> TfnswHttpClient:
    return TfnswHttpClient(
        session=session,
        api_key=config.tfnsw_api_key,
        base_url=config.tfnsw_base_url,
        timezone=config.zone,
        timeout_seconds=config.tfnsw_api_timeout,
    )


def _settings_store(config: AppConfig) -> JsonSettingsStore:
    defaults = ClientSettings(
        origin_id=config.default_origin_id,
        origin_name=config.default_origin_name,
        destination_id=config.default_destination_id,
        destination_name=config.default_destination_name,
    )
    return JsonSettingsStore(config.settings_file, defaults=defaults)


def format_board_table(board: DepartureBoard) -> str:
    """Tabular view of a departure board."""
    if not board.departures:
        return "No upcoming trains"

    rows = []
    for departure in board.departures:
        minutes = departure.minutes_until_departure
        delay = f" +{departure.delay_minutes}m" if departure.delay_minutes > 0 else ""
        changes = f", {departure.interchanges} change(s)" if departure.interchanges else ""
        platform = departure.platform.replace("Platform ", "")
        rows.append(
            f"{departure.departure_time_local}  "
            f"{'?' if minutes is None else minutes:>4} min  "
            f"Platform {platform:<3} {departure.line:<4} {departure.train_destination}"
            f"{delay} (arr {departure.arrival_time_local}{changes})"
        )
    return "\n".join(rows)


async def show_departures(
    config: AppConfig, origin_id: str, destination_id: str, count: int, as_json: bool
) -> None:
    """Query the trip planner directly and print the departure board."""
    async with aiohttp.ClientSession() as session:
        normalizer = JourneyNormalizer(config.zone, config.catchable_threshold_minutes)
        service = DepartureService(
            TfnswTripPlannerRepository(_http_client(session, config)),
            DepartureListBuilder(normalizer),
        )
        board = await service.get_departures(origin_id, destination_id, count=count)

    if as_json:
        print(json.dumps(board.to_payload(), indent=2, ensure_ascii=False))
    else:
        print(format_board_table(board))


async def show_stops(config: AppConfig, query: str, as_json: bool) -> None:
    async with aiohttp.ClientSession() as session:
        service = StopSearchService(TfnswStopRepository(_http_client(session, config)))
        stops = await service.search(query)

    if as_json:
        print(json.dumps({"stops": [s.model_dump(by_alias=True) for s in stops]}, indent=2))
        return
    if not stops:
        print(f"No stations found for '{query}'", file=sys.stderr)
        sys.exit(1)
    print(f"\nFound {len(stops)} station(s):\n")
    for stop in stops:
        print(f"  {stop.disassembled_name}")
        print(f"    ID: {stop.id}")


async def _read_commands(controller: BoardController, watcher: asyncio.Task) -> None:
    """Feed stdin lines to the board until the user quits."""
    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, sys.stdin.readline)
        if not line or not await controller.handle_command(line):
            watcher.cancel()
            return
        print(controller.render(), flush=True)


async def watch_board(config: AppConfig, server_url: str) -> None:
    """Run the polling terminal board against a running server."""
    async with aiohttp.ClientSession() as session:
        controller = BoardController(
            DeparturesApiClient(session, server_url),
            _settings_store(config),
            refresh_interval_seconds=config.refresh_interval_seconds,
            search_debounce_seconds=config.search_debounce_ms / 1000,
        )
        print(COMMAND_HELP, file=sys.stderr)
        watcher = asyncio.create_task(controller.run(lambda text: print(text, flush=True)))
        reader = asyncio.create_task(_read_commands(controller, watcher))
        try:
            await watcher
        except asyncio.CancelledError:
            logger.info("Board closed")
        finally:
            reader.cancel()


def update_settings(config: AppConfig, action: str, stop_id: str | None, name: str | None) -> None:
    store = _settings_store(config)
    settings = store.load()

    if action == "show":
        print(settings.model_dump_json(indent=2))
        return

    if action in ("set-origin", "set-destination", "set-home", "set-work"):
        if not stop_id or not name:
            print(f"{action} needs a stop ID and a name", file=sys.stderr)
            sys.exit(1)
        setter = {
            "set-origin": settings.with_origin,
            "set-destination": settings.with_destination,
            "set-home": settings.with_home,
            "set-work": settings.with_work,
        }[action]
        updated = setter(stop_id, name)
    elif action == "swap":
        updated = settings.swapped()
    else:
        route = settings.home_to_work() if action == "home-to-work" else settings.work_to_home()
        if route is None:
            print("Set both home and work first", file=sys.stderr)
            sys.exit(1)
        updated = route

    store.save(updated)
    print(
        f"Route: {updated.origin_name} ({updated.origin_id}) → "
        f"{updated.destination_name} ({updated.destination_id})"
    )


def _setup_argparse() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Which Platform? - upcoming trains between two stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Departures from Wynyard to Redfern
  which-platform departures --origin 200080 --destination 201510

  # Search for stations
  which-platform stops "Town Hall"

  # Live board against a running server
  which-platform watch --server http://localhost:3000

  # Save home and work, then flip the route
  which-platform settings set-home 200080 Wynyard
  which-platform settings set-work 201510 Redfern
  which-platform settings home-to-work
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    departures_parser = subparsers.add_parser("departures", help="Show upcoming departures")
    departures_parser.add_argument("--origin", help="Origin stop ID (default: saved route)")
    departures_parser.add_argument("--destination", help="Destination stop ID")
    departures_parser.add_argument("--count", type=int, help="Number of trips to plan")
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    stops_parser = subparsers.add_parser("stops", help="Search for stations")
    stops_parser.add_argument("query", help="Station name to search for")
    stops_parser.add_argument("--json", action="store_true", help="Output as JSON")

    watch_parser = subparsers.add_parser("watch", help="Live departure board")
    watch_parser.add_argument(
        "--server", default="http://localhost:3000", help="Which Platform? server URL"
    )

    settings_parser = subparsers.add_parser("settings", help="Show or change the saved route")
    settings_parser.add_argument(
        "action",
        choices=[
            "show",
            "set-origin",
            "set-destination",
            "set-home",
            "set-work",
            "swap",
            "home-to-work",
            "work-to-home",
        ],
    )
    settings_parser.add_argument("stop_id", nargs="?", help="Stop ID for set-* actions")
    settings_parser.add_argument("name", nargs="?", help="Stop name for set-* actions")

    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    config = AppConfig()

    try:
        config.load_toml_overrides()
        if args.command == "departures":
            saved = _settings_store(config).load()
            await show_departures(
                config,
                args.origin or saved.origin_id,
                args.destination or saved.destination_id,
                args.count or config.default_trip_count,
                args.json,
            )
        elif args.command == "stops":
            await show_stops(config, args.query, args.json)
        elif args.command == "watch":
            await watch_board(config, args.server)
        elif args.command == "settings":
            update_settings(config, args.action, args.stop_id, args.name)
    except UpstreamUnavailableError as e:
        print(f"No data available: {e.details.reason}", file=sys.stderr)
        sys.exit(1)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
