"""Allow ``python -m nanodiff``."""

from nanodiff.cli import app

if __name__ == "__main__":
    app(prog_name="nanodiff")
