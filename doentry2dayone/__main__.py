"""
Entry point: python -m doentry2dayone
"""
from doentry2dayone.cli.cli import app

if __name__ == "__main__":
    app()
