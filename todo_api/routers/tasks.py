"""
Task endpoints. Every route here sits behind the auth gate middleware.

    GET    /task/          Retrieves all the tasks.
    POST   /task/          Creates a new task given a title.
    PUT    /task/          Replaces every task with the given list.
    GET    /task/{taskID}  Retrieves the task with the given id.
    PUT    /task/{taskID}  Updates the task with the given id.
"""

import logging

from fastapi import APIRouter, Depends, Response

from ..dependencies import get_store
from ..errors import NotFoundError, ValidationError
from ..schemas.task import Task, TaskCreate, TaskList
from ..store import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=TaskList)
def list_tasks(store: TaskStore = Depends(get_store)):
    """List every task.

    Example:

        req: GET /task/
        res: 200 {"Tasks": [
               {"id": 1, "title": "Learn Go", "completed": false},
               {"id": 2, "title": "Buy bread", "completed": true}
             ]}
    """
    return TaskList(tasks=store.all())


@router.post("/")
def create_task(body: TaskCreate, store: TaskStore = Depends(get_store)):
    """Create a task from a title. An empty title is a 400."""
    task = store.create(body.title)
    logger.info("Created task %d", task.id)
    return Response(status_code=200)


@router.put("/", response_model=TaskList)
def replace_tasks(body: TaskList, store: TaskStore = Depends(get_store)):
    """Replace the whole task list and return it as stored."""
    return TaskList(tasks=store.replace_all(body.tasks))


@router.get("/{task_id}", response_model=Task)
def get_task(task_id: int, store: TaskStore = Depends(get_store)):
    task = store.find(task_id)
    if task is None:
        raise NotFoundError(f"task {task_id} not found")
    return task


@router.put("/{task_id}")
def update_task(task_id: int, task: Task, store: TaskStore = Depends(get_store)):
    """Overwrite an existing task.

    Examples:

        req: PUT /task/1 {"id": 1, "title": "Learn Go", "completed": true}
        res: 200

        req: PUT /task/1 {"id": 2, "title": "Learn Go", "completed": true}
        res: 400 inconsistent task IDs
    """
    if task.id != task_id:
        raise ValidationError("inconsistent task IDs")
    store.save(task, create=False)
    return Response(status_code=200)
