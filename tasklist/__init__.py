"""To-do list API with a task assistant."""
