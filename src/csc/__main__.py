"""Entry point for ``python -m csc``."""

from csc.cli import main

if __name__ == "__main__":
    main()
