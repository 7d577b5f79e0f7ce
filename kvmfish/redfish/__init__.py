"""Redfish module: ComputerSystem, Manager and Chassis resources.

Reset actions go through the action dispatcher onto the hardware module's
power control; boot override settings live in memory only.
"""
