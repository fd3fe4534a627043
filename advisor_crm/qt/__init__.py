"""PyQt6 surface for the task list."""
