"""Base class for application states such as menus or game scenes."""

from __future__ import annotations

from .errors import ErrorCode, StartError


class State:
    """An application state.

    Subclasses set themselves up in ``__init__`` and override
    :meth:`on_handle` and :meth:`on_update`; a subclass that holds
    resources may also define ``on_close``, which runs once on close.
    """

    closed: bool = False

    def handle(self, *args):
        """Let the state react to input or switch to another state."""
        self._check_open()
        return self.on_handle(*args)

    def update(self, *args):
        """Advance the state."""
        self._check_open()
        return self.on_update(*args)

    def close(self) -> None:
        """Release the state's resources; closing twice has no further effect."""
        if self.closed:
            return
        self.closed = True
        closer = getattr(self, "on_close", None)
        if callable(closer):
            closer()

    def __enter__(self) -> State:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _check_open(self) -> None:
        if self.closed:
            raise StartError(ErrorCode.NULL_POINTER, "state has been closed")

    def on_handle(self, *args):
        raise StartError(ErrorCode.NOT_IMPLEMENTED, f"{type(self).__name__} has no handler")

    def on_update(self, *args):
        raise StartError(ErrorCode.NOT_IMPLEMENTED, f"{type(self).__name__} has no update")