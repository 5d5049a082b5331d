"""Run the easel CLI with `python -m easel`."""

from easel.cli import app

if __name__ == "__main__":
    app()
