"""Allow ``python -m yank``."""

from yank.presentation.cli.app import app

if __name__ == "__main__":
    app(prog_name="yank")
