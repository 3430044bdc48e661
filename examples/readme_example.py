from dataclasses import dataclass
from enum import Enum

from typedcollection import Collection, InvalidArgumentError, nominal


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@nominal
@dataclass(frozen=True)
class Task:
    description: str
    status: TaskStatus


def progress(task: Task) -> Task:
    """Move a task one step through its lifecycle."""
    if task.status == TaskStatus.PENDING:
        return Task(task.description, TaskStatus.IN_PROGRESS)
    if task.status == TaskStatus.IN_PROGRESS:
        return Task(task.description, TaskStatus.COMPLETED)
    return task


def summarize(tasks: Collection[Task]) -> str:
    counts = tasks.reduce(
        lambda acc, t: {**acc, t.status.value: acc.get(t.status.value, 0) + 1}, {}
    )
    return ", ".join(f"{status}={n}" for status, n in sorted(counts.items()))


if __name__ == "__main__":
    backlog = Collection(
        "Task",
        [
            Task("Write report", TaskStatus.PENDING),
            Task("Review PR", TaskStatus.PENDING),
            Task("Fix bug", TaskStatus.PENDING),
            Task("Deploy app", TaskStatus.PENDING),
        ],
    )

    try:
        backlog.add("Call the client")
    except InvalidArgumentError as e:
        print(f"Rejected: {e}")

    # Split the backlog between two agents, keeping the original intact
    mid = backlog.count() // 2
    first, second = backlog.take(mid), backlog.drop(mid)
    print(f"Agent A: {[t.description for t in first]}")
    print(f"Agent B: {[t.description for t in second]}")

    for tick in range(3):
        first = first.map(progress, element_type=Task)
        second = second.map(progress, element_type=Task)
        print(f"Tick {tick + 1}: {summarize(first.merge(second))}")

    done = first.merge(second).every(lambda t: t.status == TaskStatus.COMPLETED)
    print(f"All done: {done}; backlog untouched: {summarize(backlog)}")
