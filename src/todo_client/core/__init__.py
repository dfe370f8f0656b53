"""
Core of the client.

Components:
- models.py: Task record + payload parsing/validation
- errors.py: TaskApiError taxonomy (network / HTTP status / malformed payload)
- ports.py: TaskApi protocol the controller talks to
- state.py: ControllerState snapshot and AppState
- controller.py: TaskListController (load / add / toggle / delete)
"""
