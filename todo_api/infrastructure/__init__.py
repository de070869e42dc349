"""Infrastructure Layer — stateful pieces: the task store and logging setup."""
