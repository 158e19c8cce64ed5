"""Shared pytest configuration and fixtures for the SnapCam test suite."""

import sys
from pathlib import Path

import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    config.addinivalue_line(
        "markers", "hardware: mark test as requiring physical hardware"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )


def pytest_addoption(parser):
    parser.addoption(
        "--run-hardware",
        action="store_true",
        default=False,
        help="Run tests that require a physical camera",
    )


def pytest_collection_modifyitems(config, items):
    """Skip hardware tests unless --run-hardware is specified."""
    if config.getoption("--run-hardware"):
        return

    skip_hardware = pytest.mark.skip(reason="Need --run-hardware option to run")
    for item in items:
        if "hardware" in item.keywords:
            item.add_marker(skip_hardware)


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def camera_config():
    from tests.infrastructure.mocks.camera_mocks import FakeCameraConfig
    return FakeCameraConfig()


@pytest.fixture
def fake_capture_factory(camera_config):
    from tests.infrastructure.mocks.camera_mocks import capture_factory
    return capture_factory(camera_config)


@pytest.fixture
def open_session(fake_capture_factory):
    """An opened DeviceSession backed by FakeVideoCapture."""
    from snapcam.capture.device import DeviceSession

    session = DeviceSession(0, capture_factory=fake_capture_factory)
    assert session.open()
    yield session
    session.release()


@pytest.fixture
def fake_display():
    from tests.infrastructure.mocks.camera_mocks import FakeDisplay
    return FakeDisplay()


@pytest.fixture
def notifier():
    from tests.infrastructure.mocks.camera_mocks import RecordingNotifier
    return RecordingNotifier()


@pytest.fixture
def scheduler():
    from tests.infrastructure.mocks.camera_mocks import FakeScheduler
    return FakeScheduler()


@pytest.fixture
def tk_root():
    tk = pytest.importorskip("tkinter")
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"Tk display unavailable: {exc}")
    root.withdraw()
    yield root
    try:
        root.destroy()
    except tk.TclError:
        pass
