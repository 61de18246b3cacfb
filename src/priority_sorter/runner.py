"""Administrative entry point for the priority sorter."""

import argparse
import logging
import sys
from collections.abc import Sequence

from .config import Config
from .database import create_db_engine, create_session_factory
from .migration import MigrationReport, PriorityMigrationService
from .mqtt import get_broadcaster, shutdown_broadcaster
from .shared_db import SQLAlchemyTaskStore
from .sorter import QueueComparator

logger = logging.getLogger("priority-sorter")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="priority-sorter", description="Build queue priorities")
    parser.add_argument("--database-url", default=Config.DATABASE_URL, help="Database URL")
    commands = parser.add_subparsers(dest="command", required=True)

    _ = commands.add_parser("queue", help="Print the queue in build order")

    rescale = commands.add_parser("rescale", help="Rescale priorities to a new bucket count")
    _ = rescale.add_argument("--from", dest="previous", type=int, required=True)
    _ = rescale.add_argument("--to", dest="new", type=int, required=True)

    _ = commands.add_parser("convert-legacy", help="Convert legacy priorities to buckets")
    return parser


def _log_report(report: MigrationReport) -> int:
    for name, priority in report.updated.items():
        logger.info(f"{name}: priority {priority}")
    for name, priority in report.updated_groups.items():
        logger.info(f"group {name}: priority {priority}")
    for failure in report.failures:
        logger.error(f"{failure.name}: {failure.operation} failed: {failure.error}")
    return 0 if report.ok else 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run one administrative command.

    Handles:
    1. Parsing command line arguments
    2. Setting up database and broadcaster
    3. Running the command and reporting per-job failures

    Returns:
        Process exit code
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=Config.LOG_LEVEL)

    engine = create_db_engine(args.database_url)
    store = SQLAlchemyTaskStore(create_session_factory(engine))
    broadcaster = get_broadcaster(
        broadcast_type=Config.BROADCAST_TYPE,
        broker=Config.MQTT_BROKER,
        port=Config.MQTT_PORT,
        topic=Config.MQTT_TOPIC,
    )

    try:
        if args.command == "queue":
            config = Config.boost_config()
            comparator = QueueComparator(config)
            entries = store.queue_snapshot(
                config.min_builds_for_average if config.duration_boost_enabled else None
            )
            for position, entry in enumerate(sorted(entries, key=comparator.sort_key), 1):
                print(f"{position:3d}  {entry.task_id}  {comparator.score_of(entry):.2f}")
            return 0

        service = PriorityMigrationService(store, broadcaster)
        if args.command == "rescale":
            previous = Config.boost_config(number_of_priorities=args.previous)
            new = Config.boost_config(number_of_priorities=args.new)
            return _log_report(service.apply_configuration(previous, new))

        if service.check_legacy() is None:
            logger.info("Not in legacy mode")
            return 0
        return _log_report(service.convert_legacy_to_advanced(Config.boost_config()))
    finally:
        shutdown_broadcaster()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
