"""
Tests for the Qt change bridge.

Signals on a plain QObject are delivered synchronously (direct connection)
without an event loop, so no QApplication is needed.
"""
import pytest
from conftest import make_spec

pytest.importorskip("PyQt5")

from services.qt_bridge import CanvasSignals


class TestCanvasSignals:

    def test_changed_emitted_per_mutation(self, canvas):
        signals = CanvasSignals(canvas)
        received = []
        signals.changed.connect(received.append)

        i = canvas.create_instance(make_spec(0, 0, 10, 10))
        canvas.move_instance(i, 5, 5)
        assert received == ['create_instance', 'move_instance']

    def test_selection_changed(self, canvas):
        signals = CanvasSignals(canvas)
        hits = []
        signals.selection_changed.connect(lambda: hits.append(True))

        i = canvas.create_instance(make_spec(0, 0, 10, 10))
        assert hits == []
        canvas.select_instance(i)
        assert hits == [True]

    def test_detach_stops_forwarding(self, canvas):
        signals = CanvasSignals(canvas)
        received = []
        signals.changed.connect(received.append)
        signals.detach()
        assert signals.canvas is None

        canvas.create_instance(make_spec(0, 0, 10, 10))
        assert received == []

    def test_attach_switches_canvas(self, canvas):
        from models.canvas import Canvas
        other = Canvas()
        signals = CanvasSignals(canvas)
        received = []
        signals.changed.connect(received.append)

        signals.attach(other)
        canvas.create_instance(make_spec(0, 0, 10, 10))
        other.create_instance(make_spec(0, 0, 10, 10))
        assert received == ['create_instance']
        assert signals.canvas is other
