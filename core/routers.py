"""
Router used by every console record app.
"""

from rest_framework.routers import SimpleRouter


class ConsoleRouter(SimpleRouter):
    """
    SimpleRouter that accepts paths with or without a trailing slash.

    The console calls ``/api/burials`` and ``/api/burials/<id>`` without one.
    """

    def __init__(self):
        super().__init__()
        self.trailing_slash = '/?'
