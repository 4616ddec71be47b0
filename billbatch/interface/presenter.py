"""Mini README: View projection of the entry collection.

Structure:
    * render_entries - one display dict per draft, amounts sanitised.
    * render_form - the drafts plus the state of the "add another bill" button.

Rendering is the only place ``sanitize_amount`` runs; the stored drafts are
never rewritten here. The ``key`` value mirrors the position of the draft and
exists purely so clients can key their rendered blocks.
"""

from __future__ import annotations

from typing import Dict, List

from ..entries import BLOCKS_LIMIT_MAX, EntryListController, note_counter, sanitize_amount
from .options import OptionCatalogue


def render_entries(
    controller: EntryListController, catalogue: OptionCatalogue
) -> List[Dict[str, object]]:
    """Project every draft into the values a form block displays."""

    rendered: List[Dict[str, object]] = []
    for index, entry in enumerate(controller.get_entries()):
        view = entry.as_dict()
        view.update(
            {
                "key": f"index-{index}",
                "index": index,
                "amount": sanitize_amount(entry.amount),
                "removable": index != 0,
                "note_counter": note_counter(entry.note),
                "payee_helper_text": catalogue.payee_helper_text(entry.payee),
            }
        )
        rendered.append(view)
    return rendered


def render_form(controller: EntryListController, catalogue: OptionCatalogue) -> Dict[str, object]:
    """Return the full form payload served by the interface."""

    return {
        "entries": render_entries(controller, catalogue),
        "can_append": controller.can_append(),
        "limit": BLOCKS_LIMIT_MAX,
    }
