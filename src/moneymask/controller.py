"""
Masked money text controller.

Sits between a text input host and the money mask: every host edit is read
back as digits, turned into an amount, re-rendered and written back with a
repositioned cursor. The controller's own write-back is delivered to the
same listeners that feed edits in, so it carries a per-instance guard that
ignores changes made while it is rewriting.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from contextlib import contextmanager
from decimal import Decimal
from typing import Callable, Optional

from .config import CursorBehavior, FormatConfig
from .cursor import CursorState, end_anchored_offset, resolve_cursor
from .money import (
    digits_to_value,
    exceeds_magnitude,
    extract_digits,
    format_value,
    strip_decoration,
    to_decimal,
    unmask,
)

logger = logging.getLogger(__name__)

Listener = Callable[[str, CursorState], None]


class MoneyMaskedTextController:
    """
    Holds the masked text, cursor and last accepted value of one field.

    The host reports edits through ``on_text_changed`` and observes rewrites
    through listeners registered with ``add_listener``.
    """

    def __init__(
        self,
        initial_value: Optional[Decimal | float | int | str] = None,
        config: Optional[FormatConfig] = None,
        **options,
    ):
        if config is None:
            config = FormatConfig(**options)
        elif options:
            config = dataclasses.replace(config, **options)
        self._config = config
        self._text = ""
        self._selection = CursorState.collapsed(0)
        self._last_value: Optional[Decimal] = None
        self._reformatting = False
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []
        self.set_value(initial_value)

    # ── State ─────────────────────────────────────────────────────

    @property
    def config(self) -> FormatConfig:
        return self._config

    @property
    def text(self) -> str:
        return self._text

    @property
    def selection(self) -> CursorState:
        return self._selection

    @property
    def last_accepted(self) -> Optional[Decimal]:
        return self._last_value

    @property
    def numeric_value(self) -> Decimal:
        """Value of the current text."""
        return unmask(self._text, self._config)

    @property
    def unmasked_text(self) -> str:
        """Current text without the left and right symbols."""
        return strip_decoration(self._text, self._config)

    # ── Listeners ─────────────────────────────────────────────────

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    # ── Edit loop ─────────────────────────────────────────────────

    def on_text_changed(self, raw_text: str, cursor: CursorState) -> None:
        """Entry point for host edits, including echoes of our own rewrite."""
        with self._lock:
            if self._reformatting:
                logger.debug("Ignoring text change during rewrite: %r", raw_text)
                return
            previous_text, previous_selection = self._text, self._selection
            if (
                self._config.cursor_behavior is CursorBehavior.END
                and cursor.is_collapsed
                and cursor.base_offset > 0
            ):
                # typing always appends at the visible end
                cursor = CursorState.collapsed(end_anchored_offset(raw_text, self._config))
            self._text = raw_text
            self._selection = cursor

            digits = extract_digits(strip_decoration(raw_text, self._config))
            if not digits:
                return
            if not self._update_value(digits_to_value(digits, self._config.precision)):
                # nothing accepted yet to fall back to
                self._update_text(previous_text, previous_selection)

    def set_value(self, value: Optional[Decimal | float | int | str]) -> None:
        """Programmatic update; ``None`` leaves the field untouched."""
        if value is None:
            return
        with self._lock:
            self._update_value(to_decimal(value))

    def clear(self) -> None:
        self.set_value(0)

    def _update_value(self, candidate: Decimal) -> bool:
        value: Optional[Decimal] = candidate
        if exceeds_magnitude(candidate):
            logger.debug(
                "Rejected %s: more than the allowed integer digits; keeping %s",
                candidate, self._last_value,
            )
            value = self._last_value
            if value is None:
                return False
        else:
            self._last_value = candidate

        self._update_text(format_value(value, self._config))
        return True

    def _update_text(self, new_text: str, selection: Optional[CursorState] = None) -> None:
        if new_text == self._text:
            return
        with self._rewriting():
            if selection is None:
                selection = resolve_cursor(
                    self._text, self._selection, new_text, self._config
                )
            self._selection = selection
            self._text = new_text
            for listener in list(self._listeners):
                listener(self._text, self._selection)

    @contextmanager
    def _rewriting(self):
        self._reformatting = True
        try:
            yield
        finally:
            self._reformatting = False
