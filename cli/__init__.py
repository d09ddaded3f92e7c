"""Command line entry point for the MeterPro CO2 relay."""
