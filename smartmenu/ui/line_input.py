"""Session-scoped line input backed by Prompt Toolkit."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from prompt_toolkit import PromptSession

SessionFactory = Callable[[], Any]


class LineInput:
    """Owns the single prompt session used to read operator input.

    The session has an explicit open/close lifecycle. Interactive child
    processes need the terminal to themselves, so :meth:`released` closes the
    session for the duration of a ``with`` block and always reopens it
    afterwards, even when the child fails to start.
    """

    def __init__(self, session_factory: Optional[SessionFactory] = None) -> None:
        self._factory: SessionFactory = session_factory or PromptSession
        self._session: Optional[Any] = None

    @property
    def is_open(self) -> bool:
        return self._session is not None

    def open(self) -> "LineInput":
        if self._session is None:
            self._session = self._factory()
        return self

    def close(self) -> None:
        self._session = None

    def recreate(self) -> "LineInput":
        self.close()
        return self.open()

    def read(self, prompt: str = "") -> str:
        """Read one line. ``EOFError``/``KeyboardInterrupt`` reach the caller."""

        if self._session is None:
            raise RuntimeError("line input is closed")
        return self._session.prompt(prompt)

    @contextmanager
    def released(self) -> Iterator[None]:
        self.close()
        try:
            yield
        finally:
            self.open()

    def __enter__(self) -> "LineInput":
        return self.open()

    def __exit__(self, *_exc: object) -> None:
        self.close()


__all__ = ["LineInput"]
