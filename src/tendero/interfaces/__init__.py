"""Ports (framework-free ABCs) implemented by TENDERO's adapters."""
