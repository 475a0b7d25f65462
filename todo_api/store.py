import logging
import threading
from typing import Dict, Iterable, List, Optional

from .errors import NotFoundError, ValidationError
from .schemas.task import Task

logger = logging.getLogger(__name__)


def _clean_title(title: str) -> str:
    title = (title or "").strip()
    if not title:
        raise ValidationError("empty title")
    return title


def _check_id(task_id: int) -> None:
    if task_id < 0:
        raise ValidationError(f"invalid task id {task_id}")


class TaskStore:
    """In-memory task collection plus its id counter.

    Every public method holds the same lock, so readers never see a
    half-applied write. Callers only ever get copies of stored tasks.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: Dict[int, Task] = {}
        self._last_id = 0

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def all(self) -> List[Task]:
        """Return every task in insertion order."""
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    def new_task(self, title: str) -> Task:
        """Build a task with a fresh id. The task is not inserted."""
        title = _clean_title(title)
        with self._lock:
            return Task(id=self._next_id(), title=title, completed=False)

    def create(self, title: str) -> Task:
        """Build a task with a fresh id and insert it in one locked step."""
        title = _clean_title(title)
        with self._lock:
            stored = Task(id=self._next_id(), title=title, completed=False)
            self._tasks[stored.id] = stored
            logger.debug("Created task %d", stored.id)
            return stored.model_copy()

    def find(self, task_id: int) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy() if task is not None else None

    def save(self, task: Task, create: bool = True) -> Task:
        """Insert or overwrite ``task``.

        A zero id gets a fresh one. With ``create=False`` an unknown id is
        a ``NotFoundError`` rather than an insert, checked before the title.
        """
        _check_id(task.id)
        with self._lock:
            if task.id not in self._tasks and not create:
                raise NotFoundError(f"task {task.id} not found")
            title = _clean_title(task.title)
            task_id = task.id or self._next_id()
            self._last_id = max(self._last_id, task_id)
            stored = Task(id=task_id, title=title, completed=task.completed)
            self._tasks[task_id] = stored
            logger.debug("Saved task %d", task_id)
            return stored.model_copy()

    def replace_all(self, tasks: Iterable[Task]) -> List[Task]:
        """Swap the whole collection for ``tasks``.

        The incoming tasks are checked before anything is touched. The id
        counter never moves backwards: zero ids are assigned after both the
        highest incoming id and every id handed out so far.
        """
        seen = set()
        cleaned = []
        for task in tasks:
            _check_id(task.id)
            title = _clean_title(task.title)
            if task.id:
                if task.id in seen:
                    raise ValidationError(f"duplicate task id {task.id}")
                seen.add(task.id)
            cleaned.append(Task(id=task.id, title=title, completed=task.completed))

        with self._lock:
            last_id = max(self._last_id, max(seen, default=0))
            replacement: Dict[int, Task] = {}
            for task in cleaned:
                if not task.id:
                    last_id += 1
                    task.id = last_id
                replacement[task.id] = task

            self._tasks = replacement
            self._last_id = last_id
            logger.debug("Replaced all tasks, %d stored", len(replacement))
            return [task.model_copy() for task in replacement.values()]
