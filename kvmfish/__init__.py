"""kvmfish: Redfish management API for GPIO-controlled KVM boards.

Sub-modules follow the same layout: config_loader, services, api router
and an x<Name>Service entry point.
"""
