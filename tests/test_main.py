"""Tests for application startup, including the fatal image-factory path."""
import sys

import pytest

import pixelgrid.__main__ as entry
from pixelgrid import bug_report
from pixelgrid.config import GridConfig


class FakeApplication:
    def __init__(self, argv):
        self.argv = argv

    def exec_(self):
        return 0


@pytest.fixture
def startup(monkeypatch, tmp_path):
    """Isolate main() from the real QApplication, settings and log folder."""
    dialogs = []
    windows = []

    class RecordingWindow:
        def __init__(self, image, config):
            windows.append((image, config))

        def show(self):
            pass

    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(entry, "setup_logging", lambda: None)
    monkeypatch.setattr(entry, "QApplication", FakeApplication)
    monkeypatch.setattr(entry, "load_config", lambda: GridConfig(width=4, height=3))
    monkeypatch.setattr(entry, "MainWindow", RecordingWindow)
    monkeypatch.setattr(bug_report, "LOG_DIR", str(tmp_path))
    monkeypatch.setattr(bug_report, "LOG_FILE", str(tmp_path / "pixelgrid.log"))
    monkeypatch.setattr(
        bug_report, "_show_dialog", lambda *args: dialogs.append(args)
    )
    return dialogs, windows, tmp_path


class TestMain:
    def test_failing_factory_aborts_startup(self, startup):
        dialogs, windows, tmp_path = startup

        def broken_factory(width, height):
            raise OSError("image module unavailable")

        with pytest.raises(SystemExit) as excinfo:
            entry.main(image_factory=broken_factory)

        assert excinfo.value.code == 1
        assert windows == []
        assert len(dialogs) == 1
        assert "image module unavailable" in dialogs[0][1]
        log = (tmp_path / "pixelgrid.log").read_text(encoding="utf-8")
        assert "OSError: image module unavailable" in log

    def test_successful_startup_opens_window(self, startup):
        dialogs, windows, _ = startup
        sizes = []

        def factory(width, height):
            sizes.append((width, height))
            return object()

        with pytest.raises(SystemExit) as excinfo:
            entry.main(image_factory=factory)

        assert excinfo.value.code == 0
        assert sizes == [(4, 3)]
        assert len(windows) == 1
        assert dialogs == []
