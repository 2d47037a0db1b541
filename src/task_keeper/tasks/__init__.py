"""
Task subsystem.

Components:
- task_models.py: the Task entity
- kv_store.py: string slot stores (SQLite, in-memory)
- task_store.py: load/save of the whole task list in one slot
- task_collection.py: in-memory list that keeps task names unique
- task_scheduler.py: deferred callbacks for delayed submissions
- task_api.py: add / delete / toggle / bulk save / clear all
"""
