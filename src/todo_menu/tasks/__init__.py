"""
Task subsystem.

Components:
- task_models.py: data structures (Task, UpdateMode)
- id_generator.py: monotonic identifier allocation
- task_store.py: in-memory storage with update-with-history semantics
- task_api.py: rendering helpers used by the menu
"""
