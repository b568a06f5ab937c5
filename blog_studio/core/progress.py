from typing import Callable


class ProgressSink:
    """
    Receives human-readable progress messages while an article is built.
    Messages are for feedback only and never part of the article.
    """

    def emit(self, message: str) -> None:
        raise NotImplementedError


class NullProgress(ProgressSink):
    def emit(self, message: str) -> None:
        pass


class CallbackProgress(ProgressSink):
    def __init__(self, callback: Callable[[str], None], prefix: str = ""):
        self.callback = callback
        self.prefix = prefix

    def emit(self, message: str) -> None:
        self.callback(f"{self.prefix}{message}")
