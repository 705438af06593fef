"""Allow running the wizard with ``python -m starter_setup``."""

from starter_setup.cli.main import main

if __name__ == "__main__":
    main()
