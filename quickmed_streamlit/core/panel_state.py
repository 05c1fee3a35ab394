from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import streamlit as st


class PanelStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    DONE = "done"
    ERROR = "error"


class PanelBusyError(RuntimeError):
    pass


@dataclass
class PanelState:
    """One analysis panel: the attached image, its request status and the last result.

    A panel holds a single result slot. Attaching a new image or resetting
    discards it; a request already in flight is not cancelled, its result is
    simply no longer wanted.
    """
    status: PanelStatus = PanelStatus.IDLE
    image: Optional[bytes] = None
    mime_type: str = "image/jpeg"
    image_name: Optional[str] = None
    result: Any = None
    error: Optional[str] = None

    @property
    def busy(self) -> bool:
        return self.status == PanelStatus.LOADING

    @property
    def can_analyze(self) -> bool:
        return self.image is not None and not self.busy

    def attach(self, image: bytes, mime_type: Optional[str] = None, name: Optional[str] = None) -> bool:
        """Returns False when the same image is already attached."""
        if self.busy:
            raise PanelBusyError("Cannot change the image while an analysis is running.")
        if self.image == image:
            return False
        self.image = image
        self.mime_type = mime_type or "image/jpeg"
        self.image_name = name
        self.result = None
        self.error = None
        self.status = PanelStatus.IDLE
        return True

    def begin(self):
        if self.image is None:
            raise ValueError("Upload an image before running the analysis.")
        if self.busy:
            raise PanelBusyError("An analysis is already running for this panel.")
        self.status = PanelStatus.LOADING
        self.result = None
        self.error = None

    def finish(self, result: Any):
        self.result = result
        self.error = None
        self.status = PanelStatus.DONE

    def fail(self, message: str):
        self.result = None
        self.error = message
        self.status = PanelStatus.ERROR

    def reset(self):
        self.status = PanelStatus.IDLE
        self.image = None
        self.mime_type = "image/jpeg"
        self.image_name = None
        self.result = None
        self.error = None


def get_panel(key: str) -> PanelState:
    panels = st.session_state.setdefault("panels", {})
    if key not in panels:
        panels[key] = PanelState()
    return panels[key]
