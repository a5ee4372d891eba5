"""Module to define the EventHandler interface."""

import asyncio
import inspect
from collections.abc import Awaitable
from typing import Protocol

from .event import Event

# pylint: disable=R0903


class EventHandler(Protocol):
    """
    EventHandler is an interface describing the application callback which receives every
    event that was not rejected. Both plain functions and coroutine functions qualify.
    """

    def __call__(self, event: Event) -> Awaitable[None] | None:
        """
        Process an event.

        :param event: the decoded event read from one of the shards
        """


class SerializedDispatcher:
    """
    Bridge between the shard readers and the single EventHandler they share.
    Only one call to the handler runs at a time, whichever shard the event came from.
    """

    def __init__(self, handler: EventHandler) -> None:
        """Initialize the dispatcher with the handler to invoke."""
        self._handler = handler
        self._lock = asyncio.Lock()

    @property
    def handler(self) -> EventHandler:
        """Return the handler events are dispatched to."""
        return self._handler

    async def dispatch(self, event: Event) -> None:
        """
        Hand the event to the handler, awaiting it if it is a coroutine function.

        :param event: the event to deliver
        """
        async with self._lock:
            result = self._handler(event)
            if inspect.isawaitable(result):
                await result
