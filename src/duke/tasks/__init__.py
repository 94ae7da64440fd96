"""
Task subsystem.

Components:
- task_models.py: data structures (ToDo, Deadline, Event, TaskKind)
- codec.py: persisted line format and display lines
- task_list.py: the mutable task list (add / list / complete / delete)
- task_store.py: flat-file snapshot storage
"""
