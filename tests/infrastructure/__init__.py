"""Test support code (fakes for the camera, display and scheduler), not tests."""
