from __future__ import annotations

from typing import Iterable, Iterator, Sequence


class SelectionSet:
    """Member ids picked by the operator for a bulk message.

    Lives outside the store: deleting a member must also discard its id here.
    """

    def __init__(self, ids: Iterable[int] = ()):
        self._ids: set[int] = {int(i) for i in ids}

    def __contains__(self, member_id: object) -> bool:
        return member_id in self._ids

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    def toggle(self, member_id: int) -> bool:
        """Flip one id; returns True when it is selected afterwards."""
        if member_id in self._ids:
            self._ids.discard(member_id)
            return False
        self._ids.add(member_id)
        return True

    def discard(self, member_id: int) -> None:
        self._ids.discard(member_id)

    def clear(self) -> None:
        self._ids.clear()

    def all_selected(self, visible_ids: Sequence[int]) -> bool:
        return len(visible_ids) > 0 and all(i in self._ids for i in visible_ids)

    def toggle_page(self, visible_ids: Sequence[int]) -> None:
        # Whole page already selected -> deselect it, otherwise select it all.
        if self.all_selected(visible_ids):
            self._ids.difference_update(visible_ids)
        else:
            self._ids.update(visible_ids)

    def to_list(self) -> list[int]:
        return sorted(self._ids)
