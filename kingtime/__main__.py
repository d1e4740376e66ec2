"""Main entry point for kingtime."""

import json
import logging
import os
import sys
from datetime import datetime
from getpass import getpass

from kingtime import transport
from kingtime.api import employees, timerecord
from kingtime.config import DEFAULT_CONFIG_PATH, Config
from kingtime.errors import ConfigNotFoundError, KingtimeError
from kingtime.wire import JST, Code

USAGE = "usage: kingtime {config|status|ls|in|out|break-start|break-end}\n"

PUNCH_COMMANDS = {
    "in": Code.IN,
    "out": Code.OUT,
    "break-start": Code.BREAK_START,
    "break-end": Code.BREAK_END,
}


def configure() -> None:
    """Interactive configuration setup."""
    sys.stdout.write("kingtime configuration\n")
    sys.stdout.write("=" * 40 + "\n")
    employee_code = input("Employee code: ")
    access_token = getpass("Access token: ")

    config = Config(access_token=access_token, employee_code=employee_code)
    config.save()
    sys.stdout.write("\n✓ Configuration saved successfully!\n")
    sys.stdout.write(f"Config file: {DEFAULT_CONFIG_PATH}\n")


def load_config() -> Config:
    """Load configuration from the environment, then from file, asking for it if missing."""
    config = Config.from_env() or Config.load()
    if not config:
        configure()
        config = Config.load()
    if not config:
        raise ConfigNotFoundError
    return config


def now() -> datetime:
    """Current time in JST."""
    return datetime.now(JST)


def status(config: Config) -> None:
    """Print whether the employee is at work."""
    records = _today_records(config)
    if not records:
        sys.stdout.write("not at work (yet)\n")
    elif records[-1].code.at_work:
        sys.stdout.write("🕴 at work\n")
    else:
        sys.stdout.write("finished the work (or have a break)\n")


def list_records(config: Config) -> None:
    """Print today's punches."""
    for record in _today_records(config):
        sys.stdout.write(f"{record.time.astimezone(JST):%H:%M:%S}  {record.code.name}\n")


def punch(config: Config, code: Code) -> None:
    """Submit a punch for the current time."""
    key = employees.get(config.access_token, config.employee_code).key
    current = now()
    request = timerecord.Request(date=current.date(), time=current, code=code)
    sys.stdout.write(json.dumps(transport.json_body(request), indent=2) + "\n")
    timerecord.post(config.access_token, key, request)


def _today_records(config: Config) -> list[timerecord.TimeRecord]:
    key = employees.get(config.access_token, config.employee_code).key
    return timerecord.get_for_employee(config.access_token, key, now().date())


def log_level() -> int:
    """Log level named by KINGTIME_LOG_LEVEL, WARNING when unset or unknown."""
    name = os.environ.get("KINGTIME_LOG_LEVEL", "WARNING").upper()
    return logging.getLevelNamesMapping().get(name, logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=log_level())

    if len(args) != 1:
        sys.stderr.write(USAGE)
        return 2
    command = args[0]
    if command == "config":
        configure()
        return 0
    if command not in ("status", "ls", *PUNCH_COMMANDS):
        sys.stderr.write(f"unknown command: {command}\n{USAGE}")
        return 2

    try:
        config = load_config()
        if command == "status":
            status(config)
        elif command == "ls":
            list_records(config)
        else:
            punch(config, PUNCH_COMMANDS[command])
    except ConfigNotFoundError as e:
        sys.stderr.write(f"No configuration found, run `kingtime config` ({str(e) or DEFAULT_CONFIG_PATH})\n")
        return 1
    except KingtimeError as e:
        sys.stderr.write(f"error: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
