"""Database adapters implementing the call protocol for concrete drivers."""
