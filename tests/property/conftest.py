"""Hypothesis configuration for property tests."""

from hypothesis import HealthCheck, settings

# Settings isolation in tests/conftest.py is an autouse, function-scoped fixture.
settings.register_profile(
    "captionreel", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("captionreel")
