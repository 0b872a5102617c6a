"""
Task subsystem.

Components:
- task_models.py: data structures (Todo, Deadline, Event, TaskKind)
- task_list.py: ordered, bounds-checked task collection
- task_store.py: pipe-delimited flat-file codec + store
"""
