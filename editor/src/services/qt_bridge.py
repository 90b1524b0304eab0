"""Qt adapter for Canvas change notifications.

The Canvas model is Qt-free and reports changes through plain listener
callables. Widgets that repaint on change connect to CanvasSignals instead
of subscribing to the model directly.
"""

import logging

from PyQt5.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class CanvasSignals(QObject):
    """Re-emits Canvas mutations as Qt signals.

    Usage:
        signals = CanvasSignals(canvas)
        signals.changed.connect(canvas_view.update)
        ...
        signals.detach()
    """

    # Emitted after every applied mutation with the operation name
    changed = pyqtSignal(str)
    # Emitted after mutations that can change the selection
    selection_changed = pyqtSignal()

    SELECTION_EVENTS = frozenset({
        'select', 'clear', 'create_group', 'add_instances_as_group',
        'delete_group', 'ungroup_components', 'delete_instance', 'delete_selection',
    })

    def __init__(self, canvas=None, parent=None):
        super().__init__(parent)
        self._canvas = None
        if canvas is not None:
            self.attach(canvas)

    @property
    def canvas(self):
        return self._canvas

    def attach(self, canvas):
        """Start forwarding notifications from canvas (detaches any previous one)"""
        if self._canvas is canvas:
            return
        self.detach()
        self._canvas = canvas
        canvas.subscribe(self._on_canvas_event)
        logger.debug("CanvasSignals attached")

    def detach(self):
        if self._canvas is None:
            return
        self._canvas.unsubscribe(self._on_canvas_event)
        self._canvas = None
        logger.debug("CanvasSignals detached")

    def _on_canvas_event(self, event: str):
        self.changed.emit(event)
        if event in self.SELECTION_EVENTS:
            self.selection_changed.emit()
