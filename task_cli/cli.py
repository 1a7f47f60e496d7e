#!/usr/bin/env python3
"""
TASK CLI - Command Line Interface
=================================
Command-line tool for managing a to-do list stored in tasks.json.

Usage:
    task-cli add "Buy groceries"
    task-cli update 1 "Buy groceries and cook dinner"
    task-cli delete 1
    task-cli mark-in-progress 1
    task-cli mark-done 1
    task-cli list
    task-cli list done
"""

import argparse
import json
import logging
import os
import re
import sys
from datetime import datetime
from typing import List, Optional

from .errors import TaskError, TaskValidationError
from .manager import TaskManager
from .schema import Task, TaskStatus
from .storage import DEFAULT_TASKS_FILE

logger = logging.getLogger("task_cli")

TASKS_FILE_ENV = "TASK_CLI_FILE"

# ASCII digits with an optional sign; int() alone also takes " 3 " and "1_000"
TASK_ID_RE = re.compile(r"[+-]?[0-9]+")

MARK_COMMANDS = {
    "mark-todo": TaskStatus.TODO,
    "mark-in-progress": TaskStatus.IN_PROGRESS,
    "mark-done": TaskStatus.DONE,
}


class CommandLineError(Exception):
    """Raised instead of argparse's exit(2) so every failure exits 1"""

    def __init__(self, message: str, usage: str):
        super().__init__(message)
        self.usage = usage


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise CommandLineError(message, self.format_usage())


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="task-cli",
        description="Task CLI - track what you need to do",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  task-cli add "Buy groceries"          Add a task
  task-cli update 1 "Buy milk"          Change a task's description
  task-cli delete 1                     Delete a task
  task-cli mark-in-progress 1           Mark a task as in-progress
  task-cli mark-done 1                  Mark a task as done
  task-cli list                         List all tasks
  task-cli list todo                    List tasks with a given status
        """
    )
    parser.add_argument(
        "--file",
        default=os.getenv(TASKS_FILE_ENV, DEFAULT_TASKS_FILE),
        help=f"Tasks file (default: ${TASKS_FILE_ENV} or {DEFAULT_TASKS_FILE})"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log what happens")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Positionals are optional here so missing ones get our own messages
    add_parser = subparsers.add_parser("add", help="Add a new task")
    add_parser.add_argument("description", nargs="?", help="Task description")

    update_parser = subparsers.add_parser("update", help="Update a task's description")
    update_parser.add_argument("task_id", nargs="?", help="Task ID")
    update_parser.add_argument("description", nargs="?", help="New description")

    delete_parser = subparsers.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("task_id", nargs="?", help="Task ID")

    for command, status in MARK_COMMANDS.items():
        mark_parser = subparsers.add_parser(command, help=f"Mark a task as {status.value}")
        mark_parser.add_argument("task_id", nargs="?", help="Task ID")

    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.add_argument(
        "status", nargs="?", default="",
        help=f"Only tasks with this status ({', '.join(TaskStatus.values())})"
    )
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def _parse_task_id(raw: Optional[str], command: str) -> int:
    if raw is None:
        raise TaskValidationError(f"Missing task ID for {command} command.")
    if not TASK_ID_RE.fullmatch(raw):
        raise TaskValidationError("Invalid task ID.")
    return int(raw)


def _rfc3339(value: datetime) -> str:
    text = value.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        return text[:-len("+00:00")] + "Z"
    return text


def format_task(task: Task) -> str:
    return "\n".join([
        f"Task {task.id}:",
        f"  Description: {task.description}",
        f"  Status: {task.status.value}",
        f"  Created: {_rfc3339(task.created_at)}",
        f"  Updated: {_rfc3339(task.updated_at)}",
        "",
    ])


def run_command(args: argparse.Namespace, manager: TaskManager) -> None:
    """Dispatch a parsed command; raises TaskError on failure"""
    if args.command == "add":
        if args.description is None:
            raise TaskValidationError("Missing description for add command.")
        task = manager.add_task(args.description)
        print(f"Task added successfully (ID: {task.id})")

    elif args.command == "update":
        if args.task_id is None or args.description is None:
            raise TaskValidationError("Missing arguments for update command.")
        task_id = _parse_task_id(args.task_id, args.command)
        manager.update_task(task_id, args.description)
        print(f"Task {task_id} updated successfully.")

    elif args.command == "delete":
        task_id = _parse_task_id(args.task_id, args.command)
        manager.delete_task(task_id)
        print(f"Task {task_id} deleted successfully.")

    elif args.command in MARK_COMMANDS:
        status = MARK_COMMANDS[args.command]
        task_id = _parse_task_id(args.task_id, args.command)
        _, changed = manager.mark_status(task_id, status)
        if changed:
            print(f"Task {task_id} marked as {status.value}.")
        else:
            print(f"Task {task_id} is already {status.value}.")

    elif args.command == "list":
        tasks = manager.list_tasks(args.status)
        if args.json:
            data = [t.model_dump(mode="json", by_alias=True) for t in tasks]
            print(json.dumps(data, indent=2))
        elif not tasks:
            print("No tasks found.")
        else:
            for task in tasks:
                print(format_task(task))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except CommandLineError as e:
        print(e.usage, end="")
        print(f"Error: {e}")
        return 1

    level = logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )
    logger.setLevel(level)

    if not args.command:
        parser.print_help()
        return 1

    manager = TaskManager(tasks_file=args.file)
    try:
        run_command(args, manager)
    except TaskError as e:
        logger.debug(f"{args.command} failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
