# File: vocabstack_app/modules/vocabulary/engine/flashcard.py
# FlashcardSequencer - thứ tự duyệt thẻ độc lập với danh sách đang lọc.

import random
from typing import Iterable, Optional

from ..schemas import FlashcardState
from .ordering import fisher_yates


class FlashcardSequencer:
    """
    Traversal order over a subset of entries for the study view.

    The order is decoupled from the browsing list so that editing filters
    mid-study never moves the active card. No operation raises: navigation
    on an empty order is a no-op and shuffles of empty slices do nothing.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.state = FlashcardState()

    @property
    def order(self):
        return self.state.order

    @property
    def index(self) -> int:
        return self.state.index

    @property
    def show_answer(self) -> bool:
        return self.state.show_answer

    def current_entry_index(self) -> Optional[int]:
        if not self.state.order:
            return None
        return self.state.order[self.state.index]

    def initialize(self, order: Iterable[int], index: Optional[int] = None, total: Optional[int] = None) -> None:
        """
        Replace the order.

        With ``total`` given, indices outside ``[0, total)`` are dropped.
        Without ``index``, the card currently shown stays under the cursor
        if it is still part of the new order; otherwise the cursor goes to 0.
        """
        new_order = list(order)
        if total is not None:
            new_order = [i for i in new_order if 0 <= i < total]

        if index is None:
            current = self.current_entry_index()
            index = 0
            if current is not None and current in new_order:
                index = new_order.index(current)
        elif new_order:
            index = max(0, min(index, len(new_order) - 1))
        else:
            index = 0

        self.state = FlashcardState(
            order=new_order,
            index=index,
            show_answer=False,
            start=0,
            end=max(0, len(new_order) - 1),
        )

    def reset(self) -> None:
        self.state = FlashcardState()

    def next(self) -> None:
        n = len(self.state.order)
        if not n:
            return
        self.state.index = (self.state.index + 1) % n
        self.state.show_answer = False

    def prev(self) -> None:
        n = len(self.state.order)
        if not n:
            return
        self.state.index = (self.state.index - 1 + n) % n
        self.state.show_answer = False

    def toggle_answer(self) -> None:
        self.state.show_answer = not self.state.show_answer

    def shuffle_remaining(self) -> None:
        """Shuffle the cards strictly after the cursor; ``order[:index+1]`` is untouched."""
        if self.state.order:
            fisher_yates(self.state.order, self.rng, start=self.state.index + 1)
        self.state.show_answer = False

    def shuffle_from_current(self) -> None:
        """Shuffle from the cursor on; the cursor stays, usually on a different card."""
        if self.state.order:
            fisher_yates(self.state.order, self.rng, start=self.state.index)
        self.state.show_answer = False

    def shuffle_all(self) -> None:
        fisher_yates(self.state.order, self.rng)
        self.state.index = 0
        self.state.show_answer = False

    def to_dict(self) -> dict:
        return self.state.to_dict()
