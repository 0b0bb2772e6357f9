"""Test suite for resrobot_departures."""
