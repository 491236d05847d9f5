"""Tests for register_instrumentations."""

import unittest
from unittest import mock

from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.trace import TracerProvider

from otel_autoloader import register_instrumentations
from otel_autoloader.instrumentation.base import InstrumentationBase


class SwitchInstrumentation(InstrumentationBase):
    """Tracks whether it is on and which providers it got."""

    def __init__(self, name="switch", config=None):
        self.active = False
        self.tracer_provider = None
        self.meter_provider = None
        super().__init__(name, "", config)

    def enable(self):
        self.active = True

    def disable(self):
        self.active = False

    def set_tracer_provider(self, tracer_provider):
        self.tracer_provider = tracer_provider
        super().set_tracer_provider(tracer_provider)

    def set_meter_provider(self, meter_provider):
        self.meter_provider = meter_provider
        super().set_meter_provider(meter_provider)


class DisabledSwitch(SwitchInstrumentation):
    def __init__(self):
        super().__init__("disabled-switch", config={"enabled": False})


class TestRegisterInstrumentations(unittest.TestCase):
    """Test end-to-end registration and unloading."""

    def setUp(self):
        self.tracer_provider = TracerProvider()
        self.meter_provider = MeterProvider()

    def tearDown(self):
        self.tracer_provider.shutdown()
        self.meter_provider.shutdown()

    def test_register_and_unload(self):
        """Test that everything is enabled on register and disabled on unload."""
        existing = SwitchInstrumentation("existing")

        unload = register_instrumentations(
            [existing, [DisabledSwitch]],
            tracer_provider=self.tracer_provider,
            meter_provider=self.meter_provider,
        )

        self.assertTrue(existing.active)
        self.assertIs(existing.tracer_provider, self.tracer_provider)
        self.assertIs(existing.meter_provider, self.meter_provider)

        unload()
        self.assertFalse(existing.active)

    def test_config_disabled_instance_is_enabled_on_register(self):
        """Test that register enables instances that didn't self-enable."""
        switch = SwitchInstrumentation("off", config={"enabled": False})
        self.assertFalse(switch.active)

        register_instrumentations([switch], self.tracer_provider, self.meter_provider)

        self.assertTrue(switch.active)

    def test_falls_back_to_global_providers(self):
        """Test that global providers are used when none are given."""
        switch = SwitchInstrumentation()
        with mock.patch(
            "opentelemetry.trace.get_tracer_provider", return_value=self.tracer_provider
        ), mock.patch(
            "opentelemetry.metrics.get_meter_provider", return_value=self.meter_provider
        ):
            register_instrumentations([switch])

        self.assertIs(switch.tracer_provider, self.tracer_provider)
        self.assertIs(switch.meter_provider, self.meter_provider)

    def test_explicit_tracer_provider_with_global_meter(self):
        """Test mixing an explicit tracer provider with the global meter provider."""
        switch = SwitchInstrumentation()
        with mock.patch(
            "opentelemetry.metrics.get_meter_provider", return_value=self.meter_provider
        ):
            register_instrumentations([switch], tracer_provider=self.tracer_provider)

        self.assertIs(switch.tracer_provider, self.tracer_provider)
        self.assertIs(switch.meter_provider, self.meter_provider)

    def test_unload_disables_every_time(self):
        """Test that the unload callable calls disable() on each call."""
        inst = mock.Mock(instrumentation_name="mocked")
        inst.get_config.return_value.enabled = True

        unload = register_instrumentations([inst], self.tracer_provider, self.meter_provider)
        unload()
        unload()

        self.assertEqual(inst.disable.call_count, 2)
        inst.enable.assert_not_called()

    def test_empty_registration(self):
        unload = register_instrumentations()
        unload()


if __name__ == "__main__":
    unittest.main()
