"""ResRobot departure board: polls trips between station pairs and publishes upcoming departures."""

__version__ = "0.1.0"
