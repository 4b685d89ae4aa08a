"""The v1 books service: route table plus access logging.

``create_app`` is what ``bookshelf run`` serves by default::

    bookshelf run                                   # bookshelf.service:create_app
    bookshelf run bookshelf.service:create_app --port 8080
"""

from bookshelf.app import App
from bookshelf.config import AppConfig
from bookshelf.middleware.access_log import LoggingMiddleware
from bookshelf.resources import Resources


def create_app(config: AppConfig | None = None) -> App:
    """Build the service, every route wrapped by the access log."""
    app = App(config)
    app.add_middleware(LoggingMiddleware(app.logger.getChild("access")))

    books = Resources(app.logger)
    app.add_route("/v1/healthcheck", books.healthcheck, name="healthcheck")
    app.add_route("/v1/books", books.list_books, name="list_books")
    app.add_route("/v1/books/{id}", books.get_book, name="get_book")
    app.add_route("/v1/books", books.create_book, methods=["POST"], name="create_book")
    app.add_route("/v1/books/{id}", books.delete_book, methods=["DELETE"], name="delete_book")
    return app
