"""Allow ``python -m quickfile``."""

from quickfile.cli.main import app

if __name__ == "__main__":
    app(prog_name="quickfile")
