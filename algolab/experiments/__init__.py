"""Experiment drivers: declarative plans, a generic runner and result sinks."""
