"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- task_store.py: in-memory storage + query/remove helpers
- task_api.py: small helpers used by the command surface (date parsing, formatting)
"""
