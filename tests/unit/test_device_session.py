import cv2
import numpy as np
import pytest

from snapcam.capture.device import DeviceSession
from tests.infrastructure.mocks.camera_mocks import FakeCameraConfig, capture_factory


class TestOpenRelease:
    def test_open_succeeds(self, fake_capture_factory):
        session = DeviceSession(0, capture_factory=fake_capture_factory)

        assert session.open() is True
        assert session.is_open is True

    def test_open_failure_releases_handle(self):
        factory = capture_factory(FakeCameraConfig(opens=False))
        session = DeviceSession(3, capture_factory=factory)

        assert session.open() is False
        assert session.is_open is False
        assert factory.created[0].release_calls == 1

    def test_passes_device_and_backend(self):
        seen = []

        def factory(device, backend):
            seen.append((device, backend))
            return capture_factory()(device, backend)

        DeviceSession(2, cv2.CAP_V4L2, capture_factory=factory).open()

        assert seen == [(2, cv2.CAP_V4L2)]

    def test_release_is_idempotent(self, fake_capture_factory):
        session = DeviceSession(0, capture_factory=fake_capture_factory)
        session.open()

        assert session.release() is True
        assert session.release() is False
        assert fake_capture_factory.created[0].release_calls == 1

    def test_settings_require_open_device(self):
        session = DeviceSession(0, capture_factory=capture_factory())

        with pytest.raises(RuntimeError):
            session.set_resolution(640, 480)


class TestCapabilities:
    def test_resolution_readback_reflects_driver(self, open_session):
        open_session.set_resolution(1920, 1080)  # not accepted by the default fake

        assert open_session.resolution() == (640, 480)

    def test_accepted_resolution_is_applied(self, camera_config, fake_capture_factory):
        camera_config.accepted_resolutions = ((1280, 720),)
        session = DeviceSession(0, capture_factory=fake_capture_factory)
        session.open()

        session.set_resolution(1280, 720)

        assert session.resolution() == (1280, 720)

    def test_fps_readback(self, camera_config, fake_capture_factory):
        camera_config.fps_readback = {60: 59.94}
        session = DeviceSession(0, capture_factory=fake_capture_factory)
        session.open()

        session.set_fps(60)

        assert session.fps() == pytest.approx(59.94)

    def test_enable_auto_controls(self, open_session, fake_capture_factory):
        open_session.enable_auto_controls()
        cap = fake_capture_factory.created[0]

        assert (cv2.CAP_PROP_AUTO_EXPOSURE, 1) in cap.set_calls
        assert (cv2.CAP_PROP_AUTOFOCUS, 1) in cap.set_calls
        assert open_session.auto_exposure is True
        assert open_session.autofocus is True


class TestTwoPhaseCapture:
    def test_grab_then_retrieve(self, open_session):
        assert open_session.grab() is True
        frame = open_session.retrieve()

        assert isinstance(frame, np.ndarray)
        assert frame.shape == (480, 640, 3)

    def test_retrieve_failure_returns_none(self, camera_config, fake_capture_factory):
        camera_config.retrieve_results = [False]
        session = DeviceSession(0, capture_factory=fake_capture_factory)
        session.open()

        assert session.grab() is True
        assert session.retrieve() is None

    def test_capture_after_release(self, open_session):
        open_session.release()

        assert open_session.grab() is False
        assert open_session.retrieve() is None
