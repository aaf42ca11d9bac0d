"""
Module: sheet.plugin

Purpose:
    Dispatch UI messages to sheet operations. The UI sends one of two
    commands: create a sheet from the selection, or cancel (close the
    plugin).

Key Classes:
    - MessageType: Supported command types
    - SheetPlugin: Message dispatcher bound to a host and configuration

Dependencies:
    - sheet.controller: create_sheet
    - sheet.host: DocumentHost
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping, Optional

from .config import SheetConfig
from .controller import SelectionError, SheetResult, create_sheet
from .host import DocumentHost

logger = logging.getLogger(__name__)


class MessageType(str, Enum):
    CREATE_SHEET = "create-sheet"
    CANCEL = "cancel"


class SheetPlugin:
    """
    Message dispatcher for the sheet plugin.

    The plugin stays open after a sheet is created so the user can make
    more; only a cancel message closes it. Selection problems are reported
    to the user through the host and do not raise.

    Example:
        >>> plugin = SheetPlugin(host)
        >>> plugin.handle_message({"type": "create-sheet"})
        >>> plugin.handle_message({"type": "cancel"})
    """

    def __init__(self, host: DocumentHost, config: Optional[SheetConfig] = None) -> None:
        self.host = host
        self.config = config or SheetConfig()

    def handle_message(self, message: Mapping[str, Any]) -> Optional[SheetResult]:
        """
        Handle one UI message.

        Args:
            message: Mapping with a "type" key

        Returns:
            SheetResult for a successful create-sheet, otherwise None

        Raises:
            ValueError: If the message type is missing or unknown
        """
        try:
            msg_type = MessageType(message.get("type"))
        except ValueError:
            raise ValueError(f"Unknown message type: {message.get('type')!r}") from None

        logger.debug(f"Received {msg_type.value} message")

        if msg_type is MessageType.CANCEL:
            self.host.close()
            return None

        try:
            return create_sheet(self.host, self.config)
        except SelectionError as e:
            self.host.notify(str(e), error=True)
            return None
