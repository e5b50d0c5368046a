# src/todo_tracker/__main__.py

from .cli.main import run

run()
