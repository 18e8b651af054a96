"""Single-board Kanban task tracker: FastAPI backend and board client."""
