"""Allow `python -m sstfixtures`."""

from sstfixtures.cli import main

if __name__ == "__main__":
    main()
