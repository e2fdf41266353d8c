"""
Entry point for running Recall as a module.

Usage:
    python -m recall grade "the mitochondria" -a "mitochondria"
    python -m recall schedule 85 --ease 2.5
    python -m recall --help
"""
from .cli import main

if __name__ == "__main__":
    main()
