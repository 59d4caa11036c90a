"""Allow ``python -m gofpatterns``."""

from gofpatterns.cli.main import main

if __name__ == "__main__":
    main()
