"""Mechanic Manager: customers, vehicles and service records for a mechanic shop."""
