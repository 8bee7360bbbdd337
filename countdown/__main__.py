# countdown/__main__.py
# Allow `python -m countdown`

from .cli.app import app

if __name__ == "__main__":
    app()
