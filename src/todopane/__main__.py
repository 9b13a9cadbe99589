"""
todopane entrypoint.

Executed via:
  python -m todopane
"""

from todopane.cli.app import app

if __name__ == "__main__":
    app()
