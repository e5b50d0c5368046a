"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskList, LoadResult)
- task_ops.py: add/complete/remove and listing format over an in-memory TaskList
- task_file.py: JSON Lines file storage (load all / save all)
- task_store.py: SQLite-backed storage, one statement per operation
- errors.py: StoreError
"""
