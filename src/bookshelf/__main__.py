"""``python -m bookshelf`` — same as the ``bookshelf`` command."""

from bookshelf.cli import main

main()
