from .auth import Claims, LoginRequest, Token
from .task import Task, TaskCreate, TaskList

# Export all schemas for easy importing
__all__ = ["Claims", "LoginRequest", "Token", "Task", "TaskCreate", "TaskList"]
