"""Order of service — the fixed 14-paragraph shape of the Penitential Act."""

from __future__ import annotations

from penitential_act.domain.models.document import DocumentRequest, RenderBlock
from penitential_act.domain.models.enums import BlockStyle, Speaker
from penitential_act.domain.rules.constants import MERCY_RESPONSES


def _speaker(speaker: Speaker, text: str) -> list[RenderBlock]:
    return [
        RenderBlock(speaker.value, BlockStyle.ROLE_LABEL),
        RenderBlock(text, BlockStyle.SPOKEN),
    ]


def build_blocks(request: DocumentRequest) -> list[RenderBlock]:
    """Return every paragraph of the document in reading order.

    Title, Priest opening, three Deacon invocations each followed by its
    mercy response, Priest closing.
    """
    blocks = [RenderBlock(request.document_title, BlockStyle.TITLE)]
    blocks += _speaker(Speaker.PRIEST, request.priest_opening)

    for invocation, response in zip(request.invocations, MERCY_RESPONSES):
        blocks += _speaker(Speaker.DEACON, invocation)
        blocks.append(RenderBlock(response, BlockStyle.RESPONSE))

    blocks += _speaker(Speaker.PRIEST, request.priest_closing)
    return blocks


def fit_texts(blocks: list[RenderBlock]) -> list[str]:
    """Texts measured by the font-fit estimate (role labels excluded)."""
    return [block.text for block in blocks if block.style != BlockStyle.ROLE_LABEL]
