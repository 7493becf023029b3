"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- task_store.py: SQLite-backed storage and its error types
"""
