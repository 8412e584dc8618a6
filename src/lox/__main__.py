"""CLI: python -m lox [script]"""

from lox.cli import main

if __name__ == "__main__":
    main()
