"""Resource handlers for the v1 API.

Placeholders: no storage, no request body, no validation. Each handler
writes its status and body and records one structured log event.
"""

import logging

from bookshelf.http.response import Response


class Resources:
    """Route handlers bound to the application logger."""

    __slots__ = ("logger",)

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    def healthcheck(self) -> str:
        self.logger.info("healthcheck handler called")
        return "status: available\n"

    def list_books(self) -> str:
        self.logger.info("listBooks handler called")
        return "list of books (coming soon)\n"

    def get_book(self, id: str) -> str:
        self.logger.info("getBook handler called", extra={"id": id})
        return f"get book with id: {id}\n"

    def create_book(self) -> tuple[str, int]:
        self.logger.info("createBook handler called")
        return "book created (coming soon)\n", 201

    def delete_book(self, id: str) -> Response:
        self.logger.info("deleteBook handler called", extra={"id": id})
        return Response(status=204)
