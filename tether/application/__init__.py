"""Application layer for tether.

This layer contains the request/response correlation service and the
commands it runs. It sits on top of the connection supervisor and reads it
only through the IConnectionSupervisor interface.
"""
