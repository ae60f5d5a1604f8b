"""tasklist: an in-memory task list manager with a small console front-end."""

__version__ = "0.1.0"
