# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from tandem.view.state import get_show_header


def header(viewer_id: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the current viewer.

    Args:
        viewer_id: Identity of the participant looking at the calendar
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"

    print(Padding("[#F43F5E]tandem[/#F43F5E]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(f"[plum1]viewing as {viewer_id}[/plum1]", (0, 1)))
