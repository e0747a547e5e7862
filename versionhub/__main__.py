"""Allow ``python -m versionhub``."""

from versionhub.cli import main

if __name__ == "__main__":
    main()
