"""
Terminal to-do list client for a remote `tasks` REST backend.

Components:
- core/: task model, error taxonomy, controller and its state snapshot
- api/: HTTP client (httpx) and an in-memory offline backend
- connectors/: console rendering + REPL
- cli/: composition root, slash commands, entrypoint
"""
