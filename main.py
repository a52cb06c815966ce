"""Main entry point for the dependency-aware task scheduler."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List

import yaml

from task_scheduler.engine.registry import TaskRegistry
from task_scheduler.models.errors import TaskError
from task_scheduler.models.task import Task, TaskStatus
from task_scheduler.policies import UrgencyPolicy, create_policy
from task_scheduler.sample.generator import SampleDataGenerator
from task_scheduler.storage.json_store import load_registry, save_tasks
from task_scheduler.utils.config import resolve_config
from task_scheduler.utils.datetime_utils import format_datetime
from task_scheduler.utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def build_registry(config: dict, policy_name: str, tasks_path: str = None) -> TaskRegistry:
    """Load the registry from a tasks file, or fill it with the sample tasks."""
    policy = create_policy(policy_name, config)

    if tasks_path and Path(tasks_path).exists():
        return load_registry(tasks_path, policy=policy, config=config)

    registry = TaskRegistry(policy=policy, config=config)
    generator = SampleDataGenerator(seed=config['sample']['seed'], config=config)
    for task in generator.sample_tasks(datetime.now()):
        registry.insert(task)
    return registry


def print_task_list(title: str, tasks: List[Task], now: datetime, config: dict, scorer: UrgencyPolicy):
    """Print a numbered list of tasks, scored with the registry's configured weights."""
    fmt = config['display']['datetime_format']
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)

    if not tasks:
        print("No tasks")
        return

    for index, task in enumerate(tasks, start=1):
        overdue_tag = " [OVERDUE]" if task.is_overdue(now) else ""
        print(f"{index}. [{task.task_id}] {task.title}")
        print(f"   Priority: {task.priority.name} | Status: {task.status.name}"
              f" | Deadline: {format_datetime(task.deadline, fmt)}{overdue_tag}")
        print(f"   Hours left: {task.hours_until_deadline(now)}"
              f" | Urgency score: {scorer.score(task, now):.2f}")


def run_demo(config: dict, policy_name: str):
    """Run the end-to-end walkthrough on the sample tasks."""
    registry = build_registry(config, policy_name)
    now = datetime.now()

    print(registry.statistics(now).to_human_readable())
    print_task_list("Recommended tasks", registry.recommended_tasks(now), now, config, registry.scorer)

    overdue = registry.overdue_tasks(now)
    if overdue:
        print_task_list(f"Overdue tasks: {len(overdue)}", overdue, now, config, registry.scorer)

    print_task_list("Execution order", registry.execution_order(now), now, config, registry.scorer)

    print("\nUpdating task status...")
    registry.update_status("TASK-001", TaskStatus.COMPLETED)
    registry.update_status("TASK-006", TaskStatus.IN_PROGRESS)

    print(registry.statistics(now).to_human_readable())
    print_task_list("All tasks (by rank)", registry.ranked_tasks(now), now, config, registry.scorer)

    return registry


def run_update(config: dict, policy_name: str, tasks_path: str, task_id: str, status: TaskStatus):
    """Update a task's status and save the task file."""
    registry = build_registry(config, policy_name, tasks_path)
    registry.update_status(task_id, status)
    save_tasks(tasks_path, registry.all_tasks())
    print(f"Task {task_id} -> {status.name} (saved to {tasks_path})")


def run_generate(config: dict, tasks_path: str):
    """Generate a random acyclic task set and save it."""
    generator = SampleDataGenerator(seed=config['sample']['seed'], config=config)
    tasks = generator.generate_tasks(datetime.now())
    save_tasks(tasks_path, tasks)
    print(f"Generated {len(tasks)} tasks")
    print(f"Tasks saved to: {tasks_path}")


def main(argv: List[str] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Dependency-aware task scheduler"
    )
    parser.add_argument(
        'command',
        choices=['demo', 'order', 'recommend', 'stats', 'overdue', 'complete', 'start', 'generate-tasks'],
        help='Command to run'
    )
    parser.add_argument(
        'task_id',
        nargs='?',
        help='Task ID (for complete/start)'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--policy',
        type=str,
        choices=['urgency', 'deadline'],
        default=None,
        help='Ranking policy to use (default: from config, else urgency)'
    )
    parser.add_argument(
        '--tasks',
        type=str,
        default=None,
        help='Path to tasks JSON file (default: from config)'
    )

    args = parser.parse_args(argv)

    try:
        config = resolve_config(args.config)
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid config file {args.config}: {e}", file=sys.stderr)
        return 1
    configure_logging(config['logging']['level'])

    policy_name = args.policy or config['ranking']['policy']
    tasks_path = args.tasks or config['storage']['tasks_file']
    now = datetime.now()

    try:
        if args.command == 'demo':
            run_demo(config, policy_name)
        elif args.command == 'generate-tasks':
            run_generate(config, tasks_path)
        elif args.command in ('complete', 'start'):
            if not args.task_id:
                parser.error(f"{args.command} requires a task ID")
            status = TaskStatus.COMPLETED if args.command == 'complete' else TaskStatus.IN_PROGRESS
            run_update(config, policy_name, tasks_path, args.task_id, status)
        else:
            registry = build_registry(config, policy_name, tasks_path)
            if args.command == 'order':
                print_task_list("Execution order", registry.execution_order(now), now, config, registry.scorer)
            elif args.command == 'recommend':
                print_task_list("Recommended tasks", registry.recommended_tasks(now), now, config, registry.scorer)
            elif args.command == 'overdue':
                print_task_list("Overdue tasks", registry.overdue_tasks(now), now, config, registry.scorer)
            elif args.command == 'stats':
                print(registry.statistics(now).to_human_readable())
    except TaskError as e:
        logger.debug("Command %s failed: %s", args.command, e.kind.value)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except KeyError as e:
        logger.debug("Command %s failed on malformed input", args.command, exc_info=True)
        print(f"Error: missing field {e} in {tasks_path}", file=sys.stderr)
        return 1
    except ValueError as e:
        logger.debug("Command %s failed on malformed input", args.command, exc_info=True)
        print(f"Error: invalid input: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
