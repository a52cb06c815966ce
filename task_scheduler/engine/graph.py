"""Dependency graph traversal: cycle detection and topological ordering.

Edges point from a task to each task it depends on. Both walks are
iterative depth-first searches over an explicit stack of
``(node, dependency iterator)`` pairs so deep dependency chains do not hit
the interpreter recursion limit. Node state is tracked with three colors:

* WHITE - not reached yet
* GRAY  - on the current DFS path
* BLACK - fully explored
"""

from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..models.errors import CircularDependency
from ..models.task import Task, TaskStatus


TaskLookup = Callable[[str], Optional[Task]]


class Color(Enum):
    WHITE = 0
    GRAY = 1
    BLACK = 2


def _cycle_path(stack_ids: List[str], repeated_id: str) -> List[str]:
    """Slice the current DFS path into the cycle that closes at ``repeated_id``."""
    start = stack_ids.index(repeated_id)
    return stack_ids[start:] + [repeated_id]


def would_create_cycle(candidate: Task, lookup: TaskLookup) -> bool:
    """Check whether inserting ``candidate`` would close a dependency cycle.

    ``lookup`` resolves IDs of already registered tasks. The candidate's own
    ID resolves to the candidate, and unknown IDs are treated as leaves.
    """

    def dependencies_of(task_id: str) -> Sequence[str]:
        if task_id == candidate.task_id:
            return candidate.dependencies
        task = lookup(task_id)
        return task.dependencies if task is not None else ()

    colors: Dict[str, Color] = {candidate.task_id: Color.GRAY}
    stack: List[Tuple[str, Iterator[str]]] = [
        (candidate.task_id, iter(candidate.dependencies))
    ]

    while stack:
        node_id, deps = stack[-1]
        for dep_id in deps:
            state = colors.get(dep_id, Color.WHITE)
            # The candidate sits at the bottom of the stack, so it is GRAY too
            if state is Color.GRAY:
                return True
            if state is Color.WHITE:
                colors[dep_id] = Color.GRAY
                stack.append((dep_id, iter(dependencies_of(dep_id))))
                break
        else:
            colors[node_id] = Color.BLACK
            stack.pop()

    return False


def topological_order(tasks: Iterable[Task], lookup: TaskLookup) -> List[Task]:
    """Order every incomplete task so that its dependencies come first.

    Roots are visited in the order given and dependencies in declared order,
    which makes the result deterministic. Completed tasks are walked as
    ordering constraints but left out of the result; unknown IDs are skipped.

    Raises:
        CircularDependency: if a cycle is reachable from an incomplete task.
    """
    order: List[Task] = []
    colors: Dict[str, Color] = {}

    for root in tasks:
        if root.status == TaskStatus.COMPLETED:
            continue
        if colors.get(root.task_id, Color.WHITE) is not Color.WHITE:
            continue

        colors[root.task_id] = Color.GRAY
        stack: List[Tuple[Task, Iterator[str]]] = [(root, iter(root.dependencies))]

        while stack:
            task, deps = stack[-1]
            for dep_id in deps:
                state = colors.get(dep_id, Color.WHITE)
                if state is Color.GRAY:
                    path = _cycle_path([t.task_id for t, _ in stack], dep_id)
                    raise CircularDependency(
                        f"Circular dependency detected: {' -> '.join(path)}",
                        task_id=dep_id,
                    )
                if state is Color.BLACK:
                    continue
                dep = lookup(dep_id)
                if dep is None:
                    continue
                colors[dep_id] = Color.GRAY
                stack.append((dep, iter(dep.dependencies)))
                break
            else:
                stack.pop()
                colors[task.task_id] = Color.BLACK
                if task.status != TaskStatus.COMPLETED:
                    order.append(task)

    return order


def unresolved_dependencies(task: Task, lookup: TaskLookup) -> List[str]:
    """List the dependency IDs of ``task`` that are missing or not completed."""
    unresolved = []
    for dep_id in task.dependencies:
        dep = lookup(dep_id)
        if dep is None or dep.status != TaskStatus.COMPLETED:
            unresolved.append(dep_id)
    return unresolved
