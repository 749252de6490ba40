"""Field-instruction state machine.

Word encodes the target of a hyperlink field as machine-readable text inside
``<w:instrText>`` (``HYPERLINK "https://..."``) while the visible label lives
in an ordinary run.  The extractor tracks whether it is currently inside such
an element with a two-state machine keyed purely on tag-name equality.

There is no element stack: the first closing ``w:instrText`` returns to
``NORMAL`` even if instruction elements were nested or overlapped.  Such
markup is not produced by Word and suppression is not guaranteed to balance
for it.
"""

from __future__ import annotations

from enum import Enum

from docmerge.markup.events import EndElement, MarkupEvent, StartElement

FIELD_INSTRUCTION_TAG = "w:instrText"


class FieldState(Enum):
    """Position of the parser relative to a field-instruction element."""

    NORMAL = "normal"
    IN_FIELD_INSTRUCTION = "in_field_instruction"


def next_state(
    state: FieldState,
    event: MarkupEvent,
    tag: str = FIELD_INSTRUCTION_TAG,
) -> FieldState:
    """Return the state after observing ``event``."""

    if isinstance(event, StartElement) and event.name == tag:
        return FieldState.IN_FIELD_INSTRUCTION
    if isinstance(event, EndElement) and event.name == tag:
        return FieldState.NORMAL
    return state


__all__ = ["FIELD_INSTRUCTION_TAG", "FieldState", "next_state"]
