"""Allow ``python -m iconseek``."""

from iconseek.cli import main

if __name__ == "__main__":
    main()
