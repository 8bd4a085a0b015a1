"""Competitive set generation for creature battle formats."""

__version__ = "0.1.0"
