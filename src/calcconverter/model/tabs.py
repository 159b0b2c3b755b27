"""
Tab Controller
Exactly one of the two panels is visible at a time.
"""
from __future__ import annotations

from enum import StrEnum
import logging
from typing import Optional, Protocol, Union

logger = logging.getLogger(__name__)


class Tab(StrEnum):
    CALCULATOR = "calculator"
    CONVERTER = "converter"


class PanelSink(Protocol):
    def show_tab(self, tab: Tab) -> None: ...


class TabController:
    def __init__(self, sink: Optional[PanelSink] = None, initial: Tab = Tab.CALCULATOR) -> None:
        self.sink = sink
        self.active: Tab = initial

    def select(self, tab: Union[Tab, str]) -> None:
        """
        Activate a tab by enum or by its tag.

        Raises:
            ValueError: If the tag does not name a tab.
        """
        target = Tab(tab)
        if target is not self.active:
            logger.debug(f"Switching tab {self.active} -> {target}")
        self.active = target
        if self.sink is not None:
            self.sink.show_tab(target)

    def is_active(self, tab: Tab) -> bool:
        return self.active is tab
