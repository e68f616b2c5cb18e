# Minimal conftest providing a fallback 'qtbot' fixture if pytest-qt is not installed.
# Qt runs on the offscreen platform and matplotlib on Agg so the suite is headless.

import sys
import os
import contextlib
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover

    @pytest.fixture
    def qtbot():  # type: ignore
        QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
        app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)  # noqa: F841
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

            @contextlib.contextmanager
            def waitSignal(self, *args, **kwargs):  # no-op stub
                yield

        yield Bot()
        for w in widgets:
            w.close()


@pytest.fixture
def dataset():
    from domain.mood_data import sample_dataset

    return sample_dataset()
