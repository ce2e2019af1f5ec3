"""Defines the `formstack` logger shared by every client and session."""


import logging


class FormstackLogger(logging.Logger):
    """Process-wide logger named `formstack`, level WARNING.

    No handlers are attached, records go nowhere until the application adds one
    (or lowers the level to DEBUG to see each request line).
    """

    _instance = None
    _init_flag = False

    def __new__(cls, *args, **kwargs):
        """Every FormstackLogger() call returns the same object"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if FormstackLogger._init_flag:
            return

        super().__init__("formstack", logging.WARNING)
        FormstackLogger._init_flag = True
